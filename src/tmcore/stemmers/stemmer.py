"""Locale-aware rule-based stemmer."""

import re
from enum import Enum
from typing import Dict, Iterable, List, Tuple
from ..core.util import primary_subtag
from . import rules

class StemmerLocale(str, Enum):
    """Locales with a stemming rule table."""

    ENGLISH = "en"
    GERMAN = "de"
    FRENCH = "fr"
    SPANISH = "es"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    DUTCH = "nl"
    RUSSIAN = "ru"

    @classmethod
    def from_tag(cls, locale_tag: str) -> "StemmerLocale":
        """
        Pick the locale from a tag's primary subtag, case-insensitively.

        Unknown or malformed tags fall back to English.

        Example:
            >>> StemmerLocale.from_tag("pt-BR")
            <StemmerLocale.PORTUGUESE: 'pt'>
            >>> StemmerLocale.from_tag("xx-YY")
            <StemmerLocale.ENGLISH: 'en'>
        """
        code = primary_subtag(locale_tag).lower()
        for locale in cls:
            if locale.value == code:
                return locale
        return cls.ENGLISH

_SUFFIX_TABLES: Dict[StemmerLocale, Tuple[rules.SuffixRule, ...]] = {
    StemmerLocale.GERMAN: rules.GERMAN,
    StemmerLocale.FRENCH: rules.FRENCH,
    StemmerLocale.SPANISH: rules.SPANISH,
    StemmerLocale.ITALIAN: rules.ITALIAN,
    StemmerLocale.PORTUGUESE: rules.PORTUGUESE,
    StemmerLocale.DUTCH: rules.DUTCH,
    StemmerLocale.RUSSIAN: rules.RUSSIAN,
}

# Latin letters (ASCII, Latin-1 supplement, Latin Extended-A/B) or Cyrillic
_WORD_CHAR = re.compile(r"[A-Za-zÀ-ÖØ-öø-ɏЀ-ӿ]")

def _has_vowel(stem: str) -> bool:
    return any(ch in rules.ENGLISH_VOWELS for ch in stem)

def _stem_english(word: str) -> str:
    # Step 1a: plurals
    if word.endswith("sses"):
        word = word[:-2]
    elif word.endswith("ies"):
        word = word[:-2]
    elif word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        word = word[:-1]

    # Step 1b: past tense and gerunds, only if a vowel survives
    if word.endswith("eed"):
        if _has_vowel(word[:-3]):
            word = word[:-1]
    elif word.endswith("ed"):
        if _has_vowel(word[:-2]):
            word = word[:-2]
    elif word.endswith("ing"):
        if _has_vowel(word[:-3]):
            word = word[:-3]

    word = rules.apply_suffix_rules(word, rules.ENGLISH_STEP2, cascade=False)
    word = rules.apply_suffix_rules(word, rules.ENGLISH_STEP3, cascade=False)
    return word

class Stemmer:
    """
    Reduces words to an approximate root so morphological variants compare equal.

    English uses a simplified Porter algorithm. The other locales strip
    inflectional suffixes from an ordered table, cascading: every suffix is
    checked against the word as already shortened by earlier ones.
    """

    def __init__(self, locale: StemmerLocale = StemmerLocale.ENGLISH):
        self.locale = locale

    @classmethod
    def from_string(cls, locale_tag: str) -> "Stemmer":
        """Create a stemmer for a locale tag such as ``"de-AT"``; unknown tags give English."""
        return cls(StemmerLocale.from_tag(locale_tag))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Stemmer):
            return NotImplemented
        return self.locale == other.locale

    def __hash__(self) -> int:
        return hash(self.locale)

    def __repr__(self) -> str:
        return f"Stemmer(locale={self.locale.value!r})"

    def stem(self, word: str) -> str:
        """
        Stem a single word.

        Args:
            word: Word in any case

        Returns:
            str: Lowercased stem
        """
        word = word.lower()
        if self.locale is StemmerLocale.ENGLISH:
            return _stem_english(word)
        return rules.apply_suffix_rules(word, _SUFFIX_TABLES[self.locale], cascade=True)

    def stem_words(self, words: Iterable[str]) -> List[str]:
        """Stem every word in order."""
        return [self.stem(word) for word in words]

    def stem_text(self, text: str) -> str:
        """
        Stem the words of a space separated text.

        Tokens without a Latin or Cyrillic letter (numbers, punctuation,
        symbols) are kept as they are. Tokens are split on single spaces and
        rejoined with one space.
        """
        tokens = text.split(" ")
        return " ".join(self.stem(token) if _WORD_CHAR.search(token) else token
                        for token in tokens)
