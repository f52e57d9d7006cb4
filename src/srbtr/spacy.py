"""
spaCy integration for srbtr.

Provides a pipeline component that attaches Cyrillic transliterations to
docs and tokens. The tokenization itself is left untouched.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("sr")
    >>> nlp.add_pipe("serbian_cyrillic")
    >>> doc = nlp("Ljubav je čudo")
    >>> doc._.cyrillic
    'Љубав је чудо'
"""

from spacy.language import Language
from spacy.tokens import Doc, Token

from srbtr.cyrillic._transcoder import transliterate

__all__ = [
    "SerbianCyrillicComponent",
    "create_serbian_cyrillic",
]


@Language.factory(
    "serbian_cyrillic",
    default_config={"legacy_dj": True},
    assigns=["doc._.cyrillic", "token._.cyrillic"],
)
def create_serbian_cyrillic(
    nlp: Language,
    name: str,
    legacy_dj: bool = True,
) -> "SerbianCyrillicComponent":
    """Create a Serbian Latin → Cyrillic pipeline component."""
    return SerbianCyrillicComponent(nlp, name, legacy_dj=legacy_dj)


class SerbianCyrillicComponent:
    """
    spaCy pipeline component for Serbian Latin → Cyrillic transliteration.

    Extensions:
        - Doc._.cyrillic: Full transliterated text.
        - Token._.cyrillic: Transliterated token text.

    Token transliterations are computed per token, so a digraph split across
    two tokens is not joined.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        legacy_dj: bool = True,
    ) -> None:
        self.name = name
        self.legacy_dj = legacy_dj

        if not Doc.has_extension("cyrillic"):
            Doc.set_extension("cyrillic", default=None)
        if not Token.has_extension("cyrillic"):
            Token.set_extension("cyrillic", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.cyrillic = transliterate(doc.text, legacy_dj=self.legacy_dj)

        for token in doc:
            token._.cyrillic = transliterate(token.text, legacy_dj=self.legacy_dj)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "SerbianCyrillicComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "SerbianCyrillicComponent":
        return self
