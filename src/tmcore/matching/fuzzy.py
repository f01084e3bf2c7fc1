"""Fuzzy ranking of a translation memory corpus against a query."""

import threading
from typing import Callable, List, Optional, Sequence
from ..config.schema import MatchConfig
from ..core.abc import Logger, Meter
from ..core.distance import EditDistanceBuffer, levenshtein_distance
from ..core.types import Match
from ..core.util import text_units

def _score(distance: int, a: str, b: str) -> float:
    max_len = max(len(text_units(a)), len(text_units(b)))
    if max_len == 0:
        return 1.0
    return 1.0 - distance / max_len

def find_matches(config: MatchConfig, query: str, corpus: Sequence[str], *,
                 key: Optional[Callable[[str], str]] = None,
                 buffer: Optional[EditDistanceBuffer] = None) -> List[Match]:
    """
    Rank corpus entries by Levenshtein similarity to the query.

    Comparison is case-insensitive. Entries scoring below the threshold are
    dropped; the rest are sorted by descending score, ties keeping their
    corpus order, and cut to ``config.max_results``.

    Args:
        config: Threshold and result cap
        query: Text to look up
        corpus: Candidate strings; order decides ties
        key: Optional normalizer applied to the query and each entry before
            comparison (e.g. a stemmer); matches still carry the original text
        buffer: Optional scratch matrix reused across distance calls

    Returns:
        List[Match]: At most ``config.max_results`` matches
    """
    normalize = key if key is not None else (lambda s: s)
    q = normalize(query).lower()

    matches = []
    for entry in corpus:
        candidate = normalize(entry).lower()
        distance = levenshtein_distance(q, candidate, buffer)
        score = _score(distance, q, candidate)
        if score >= config.threshold:
            matches.append(Match(text=entry, score=score, distance=distance))

    # list.sort is stable, reverse included
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches[:config.max_results]

def best_match(config: MatchConfig, query: str, candidates: Sequence[str], *,
               key: Optional[Callable[[str], str]] = None,
               buffer: Optional[EditDistanceBuffer] = None) -> Optional[Match]:
    """Top match for the query, or None when nothing clears the threshold."""
    matches = find_matches(config, query, candidates, key=key, buffer=buffer)
    return matches[0] if matches else None

def agrep(pattern: str, text: str, max_distance: int,
          buffer: Optional[EditDistanceBuffer] = None) -> bool:
    """
    Approximate grep: is ``text`` within ``max_distance`` edits of ``pattern``?

    A negative ``max_distance`` matches nothing.
    """
    if max_distance < 0:
        return False
    return levenshtein_distance(pattern, text, buffer) <= max_distance

def agrep_filter(pattern: str, corpus: Sequence[str], max_distance: int,
                 buffer: Optional[EditDistanceBuffer] = None) -> List[str]:
    """Corpus entries within ``max_distance`` edits of ``pattern``, in corpus order."""
    if buffer is None:
        buffer = EditDistanceBuffer()
    return [entry for entry in corpus if agrep(pattern, entry, max_distance, buffer)]

class FuzzyMatcher:
    """
    Fuzzy matcher bound to a configuration.

    Each thread that uses the matcher gets its own scratch matrix, created on
    first use, so one instance can be shared across threads without locking.
    """

    def __init__(self, config: Optional[MatchConfig] = None, *,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize matcher.

        Args:
            config: Threshold and result cap (defaults to ``MatchConfig()``)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config if config is not None else MatchConfig()
        self.log = logger
        self.meter = meter
        self._local = threading.local()

    @property
    def _buffer(self) -> EditDistanceBuffer:
        buffer = getattr(self._local, "buffer", None)
        if buffer is None:
            buffer = self._local.buffer = EditDistanceBuffer()
        return buffer

    def with_config(self, config: MatchConfig) -> "FuzzyMatcher":
        """Return a new matcher sharing the hooks but using ``config``."""
        return FuzzyMatcher(config, logger=self.log, meter=self.meter)

    def find_matches(self, query: str, corpus: Sequence[str], *,
                     key: Optional[Callable[[str], str]] = None) -> List[Match]:
        """Rank ``corpus`` against ``query``; see the module-level ``find_matches``."""
        matches = find_matches(self.config, query, corpus, key=key, buffer=self._buffer)

        if self.meter:
            if matches:
                self.meter.inc("tmcore.match.hit")
                self.meter.observe("tmcore.match.best_score", matches[0].score)
            else:
                self.meter.inc("tmcore.match.miss")
        if self.log:
            self.log.info("fuzzy_match",
                          corpus_size=len(corpus),
                          matches=len(matches),
                          best_score=matches[0].score if matches else None,
                          threshold=self.config.threshold)
        return matches

    def best_match(self, query: str, candidates: Sequence[str], *,
                   key: Optional[Callable[[str], str]] = None) -> Optional[Match]:
        matches = self.find_matches(query, candidates, key=key)
        return matches[0] if matches else None

    def agrep(self, pattern: str, text: str, max_distance: int) -> bool:
        return agrep(pattern, text, max_distance, self._buffer)

    def agrep_filter(self, pattern: str, corpus: Sequence[str], max_distance: int) -> List[str]:
        return agrep_filter(pattern, corpus, max_distance, self._buffer)
