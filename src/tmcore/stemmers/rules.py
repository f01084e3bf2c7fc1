"""Suffix rule tables for the rule-based stemmers.

Each table is an ordered tuple of ``(suffix, replacement)`` pairs. Order is
significant: ``apply_suffix_rules`` tries the pairs top to bottom.
"""

from typing import Sequence, Tuple

SuffixRule = Tuple[str, str]

ENGLISH_VOWELS = frozenset("aeiou")

# Porter step 2: derivational suffixes
ENGLISH_STEP2: Tuple[SuffixRule, ...] = (
    ("ational", "ate"),
    ("tional", "tion"),
    ("enci", "ence"),
    ("anci", "ance"),
    ("izer", "ize"),
    ("ization", "ize"),
    ("ation", "ate"),
    ("ator", "ate"),
    ("alism", "al"),
    ("iveness", "ive"),
    ("fulness", "ful"),
    ("ousness", "ous"),
    ("aliti", "al"),
    ("iviti", "ive"),
    ("biliti", "ble"),
)

# Porter step 3
ENGLISH_STEP3: Tuple[SuffixRule, ...] = (
    ("icate", "ic"),
    ("ative", ""),
    ("alize", "al"),
    ("iciti", "ic"),
    ("ical", "ic"),
    ("ful", ""),
    ("ness", ""),
)

def _strip(*suffixes: str) -> Tuple[SuffixRule, ...]:
    return tuple((suffix, "") for suffix in suffixes)

GERMAN = _strip(
    "ungen", "ung", "heiten", "heit", "keiten", "keit", "lich", "isch",
    "ern", "em", "en", "er", "es", "e", "s",
)

FRENCH = _strip(
    "issements", "issement", "atrices", "atrice", "ations", "ation",
    "ements", "ement", "euses", "euse", "ités", "ité", "ment", "eux",
    "ées", "ée", "és", "é", "er", "es", "e", "s",
)

SPANISH = _strip(
    "amientos", "imientos", "amiento", "imiento", "aciones", "ación",
    "idades", "idad", "mente", "ando", "iendo", "ados", "idos", "ado",
    "ido", "ar", "er", "ir", "as", "es", "os", "a", "o", "e",
)

ITALIAN = _strip(
    "azioni", "azione", "amente", "mente", "ità", "ando", "endo",
    "ato", "ito", "are", "ere", "ire", "i", "e", "a", "o",
)

PORTUGUESE = _strip(
    "amentos", "imentos", "amento", "imento", "ações", "ação",
    "idades", "idade", "mente", "ando", "endo", "indo", "ado", "ido",
    "ar", "er", "ir", "as", "es", "os", "a", "e", "o",
)

DUTCH = _strip(
    "heden", "heid", "ingen", "ing", "lijk", "baar", "end",
    "en", "er", "e", "s",
)

RUSSIAN = _strip(
    "ость", "ости", "ение", "ения", "ами", "ями", "ого", "его", "ому", "ему",
    "ать", "ять", "ить", "еть", "ые", "ие", "ый", "ий", "ой", "ая", "яя",
    "ое", "ее", "ов", "ев", "ах", "ях", "ам", "ям",
    "а", "я", "о", "е", "ы", "и", "у", "ю", "ь",
)

def apply_suffix_rules(word: str, rules: Sequence[SuffixRule], cascade: bool = True) -> str:
    """
    Apply an ordered suffix table to a word.

    A rule fires when the word currently ends with its suffix and the stem
    left after removing it is longer than ``len(suffix) + 2`` units. With
    ``cascade`` every rule is tried in turn against the progressively
    rewritten word; without it the first rule that fires ends the pass.
    """
    for suffix, replacement in rules:
        if word.endswith(suffix) and len(word) - len(suffix) > len(suffix) + 2:
            word = word[:len(word) - len(suffix)] + replacement
            if not cascade:
                break
    return word
