"""
Letter tables for Serbian Latin → Cyrillic transliteration.

All keys and values are stored in NFC so that lookups can compare
normalized graphemes directly. The tables are read-only and shared by
every Transcoder instance.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "LATIN_TO_CYRILLIC",
    "COMPOSITE_DIGRAPHS",
    "LEGACY_ALIASES",
    "DIGRAPH_LEADS",
    "nfc",
]


def nfc(text: str) -> str:
    """Return the NFC (canonical composed) form of *text*."""
    return unicodedata.normalize("NFC", text)


def _frozen(pairs: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType({nfc(k): nfc(v) for k, v in pairs.items()})


# =============================================================================
# Alphabet
# =============================================================================

# Alphabetical (azbuka) order: 30 letters, upper and lower case.
LATIN_TO_CYRILLIC = _frozen(
    {
        "A": "А", "a": "а",
        "B": "Б", "b": "б",
        "V": "В", "v": "в",
        "G": "Г", "g": "г",
        "D": "Д", "d": "д",
        "Đ": "Ђ", "đ": "ђ",
        "E": "Е", "e": "е",
        "Ž": "Ж", "ž": "ж",
        "Z": "З", "z": "з",
        "I": "И", "i": "и",
        "J": "Ј", "j": "ј",
        "K": "К", "k": "к",
        "L": "Л", "l": "л",
        "Lj": "Љ", "lj": "љ",
        "M": "М", "m": "м",
        "N": "Н", "n": "н",
        "Nj": "Њ", "nj": "њ",
        "O": "О", "o": "о",
        "P": "П", "p": "п",
        "R": "Р", "r": "р",
        "S": "С", "s": "с",
        "T": "Т", "t": "т",
        "Ć": "Ћ", "ć": "ћ",
        "U": "У", "u": "у",
        "F": "Ф", "f": "ф",
        "H": "Х", "h": "х",
        "C": "Ц", "c": "ц",
        "Č": "Ч", "č": "ч",
        "Dž": "Џ", "dž": "џ",
        "Š": "Ш", "š": "ш",
        # U+00D0 (eth) is commonly typed in place of U+0110
        "\u00d0": "Ђ",
    }
)

# Latin Extended-B codepoints that encode a whole digraph. Values are
# spellings (not Cyrillic) and go through LATIN_TO_CYRILLIC afterwards.
COMPOSITE_DIGRAPHS = _frozen(
    {
        "\u01c4": "Dž",  # Ǆ
        "\u01c5": "Dž",  # ǅ
        "\u01c6": "dž",  # ǆ
        "\u01c7": "Lj",  # Ǉ
        "\u01c8": "Lj",  # ǈ
        "\u01c9": "lj",  # ǉ
        "\u01ca": "Nj",  # Ǌ
        "\u01cb": "Nj",  # ǋ
        "\u01cc": "nj",  # ǌ
    }
)

# "dj" is not a letter, but is still written for "đ" where the keyboard
# lacks it. Keyed on exact casing: "DJ" is not listed here.
LEGACY_ALIASES = _frozen({"Dj": "Đ", "dj": "đ"})

# First letters of every two-letter key (digraphs and legacy aliases).
DIGRAPH_LEADS = frozenset({"D", "d", "L", "l", "N", "n"})
