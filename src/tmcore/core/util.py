"""Small text helpers shared by the algorithm modules."""

from typing import List

def text_units(text: str) -> List[str]:
    """
    Split text into the atomic units every algorithm iterates over.

    A unit is one Unicode code point (an element of ``str``). Multi code point
    glyphs such as emoji with modifiers or letters with combining marks count
    as several units; distances, n-grams, stem lengths and segment offsets all
    share this definition.
    """
    return list(text)

def primary_subtag(locale_tag: str) -> str:
    """Return the part of a locale tag before the first '-' (``"pt-BR"`` -> ``"pt"``)."""
    return locale_tag.split("-", 1)[0]
