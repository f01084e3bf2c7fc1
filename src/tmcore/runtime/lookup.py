"""Translation memory lookup: segment, optionally stem, then fuzzy match."""

from typing import List, Optional, Sequence
from ..config.schema import MatchConfig, TMSettings
from ..core.abc import Logger, Meter
from ..core.types import Match, SegmentMatches
from ..matching.fuzzy import FuzzyMatcher
from ..segmenters.segmenter import Segmenter
from ..stemmers.stemmer import Stemmer

class TranslationMemoryLookup:
    """
    Finds reusable translations for every sentence of a source text.

    The text is cut into sentences for the source locale, each sentence is
    ranked against the corpus and, when stemming is enabled, both sides are
    compared in stemmed form so inflected variants still line up.
    """

    def __init__(self, *, settings: Optional[TMSettings] = None,
                 config: Optional[MatchConfig] = None,
                 locale: Optional[str] = None,
                 stemming: Optional[bool] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize lookup from settings and/or explicit overrides.

        Args:
            settings: Loaded settings (defaults to ``TMSettings()``)
            config: Overrides ``settings.matching``
            locale: Overrides ``settings.locale``
            stemming: Overrides ``settings.stemming``
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        settings = settings if settings is not None else TMSettings()
        self.locale = locale if locale is not None else settings.locale
        self.stemming = stemming if stemming is not None else settings.stemming
        self.log = logger
        self.meter = meter

        self.segmenter = Segmenter.from_string(self.locale, logger=logger)
        self.stemmer = Stemmer.from_string(self.locale)
        self.matcher = FuzzyMatcher(config if config is not None else settings.matching,
                                    logger=logger, meter=meter)

    @property
    def config(self) -> MatchConfig:
        return self.matcher.config

    def lookup(self, text: str, corpus: Sequence[str]) -> List[SegmentMatches]:
        """
        Rank the corpus against each sentence of ``text``.

        Args:
            text: Source document or paragraph
            corpus: Previously translated source strings

        Returns:
            List[SegmentMatches]: One entry per located sentence, in text order
        """
        key = self.stemmer.stem_text if self.stemming else None
        results = []
        for segment in self.segmenter.segment_sentences_with_positions(text):
            matches = self.matcher.find_matches(segment.text, corpus, key=key)
            results.append(SegmentMatches(segment=segment, matches=matches))

        if self.meter:
            self.meter.inc("tmcore.lookup.segments", len(results))
        if self.log:
            self.log.info("tm_lookup",
                          locale=self.locale,
                          stemming=self.stemming,
                          segments=len(results),
                          segments_with_match=sum(1 for r in results if r.matches))
        return results

    def best_matches(self, text: str, corpus: Sequence[str]) -> List[Optional[Match]]:
        """Best candidate (or None) for each sentence of ``text``."""
        return [result.best for result in self.lookup(text, corpus)]

    def prefilter(self, pattern: str, corpus: Sequence[str], max_distance: int) -> List[str]:
        """Cheap approximate-grep pass to shrink a large corpus before ranking."""
        return self.matcher.agrep_filter(pattern, corpus, max_distance)
