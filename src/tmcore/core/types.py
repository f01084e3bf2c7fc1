"""Value types produced by the matching, segmentation and lookup components."""

from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class Match:
    """A corpus entry that cleared the fuzzy match threshold."""
    text: str                    # Original (non-lowercased) corpus text
    score: float                 # 1 - distance / max_len, in [0, 1]
    distance: int                # Levenshtein distance to the query

    def __post_init__(self):
        if self.distance < 0:
            raise ValueError(f"Match distance must be non-negative, got {self.distance}")
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Match score must be within [0, 1], got {self.score}")

@dataclass(frozen=True)
class Segment:
    """A sentence or word located in the text it was cut from."""
    text: str
    start: int                   # Code point offset, inclusive
    end: int                     # Code point offset, exclusive

    def __len__(self) -> int:
        return self.end - self.start

@dataclass
class SegmentMatches:
    """Translation memory candidates for one source sentence."""
    segment: Segment
    matches: List[Match] = field(default_factory=list)

    @property
    def best(self) -> Optional[Match]:
        """Highest scoring candidate, if any cleared the threshold."""
        return self.matches[0] if self.matches else None
