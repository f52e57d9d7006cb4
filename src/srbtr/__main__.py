import sys

from srbtr.cli import main

sys.exit(main())
