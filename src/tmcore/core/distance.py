"""Edit distance and string similarity metrics."""

from typing import Optional, Set
import numpy as np
from .util import text_units

class EditDistanceBuffer:
    """
    Reusable scratch matrix for edit distance computations.

    Ranking a large corpus calls the distance functions thousands of times;
    passing the same buffer avoids allocating a fresh matrix for every pair.
    The buffer only grows. It is not safe to share one buffer between threads.
    """

    def __init__(self, rows: int = 0, cols: int = 0):
        self._scratch = np.zeros((rows, cols), dtype=np.int64)

    @property
    def shape(self) -> tuple:
        return self._scratch.shape

    def matrix(self, rows: int, cols: int) -> np.ndarray:
        """
        Return a ``rows x cols`` view with row 0 and column 0 set to their index.

        Interior cells hold stale values from earlier calls; the recurrences
        overwrite every one of them before reading it.
        """
        cur_rows, cur_cols = self._scratch.shape
        if rows > cur_rows or cols > cur_cols:
            self._scratch = np.zeros((max(rows, cur_rows), max(cols, cur_cols)), dtype=np.int64)
        M = self._scratch[:rows, :cols]
        M[:, 0] = np.arange(rows)
        M[0, :] = np.arange(cols)
        return M

def _edit_matrix(rows: int, cols: int, buffer: Optional[EditDistanceBuffer]) -> np.ndarray:
    if buffer is not None:
        return buffer.matrix(rows, cols)
    return EditDistanceBuffer(rows, cols).matrix(rows, cols)

def _codes(units: list) -> np.ndarray:
    return np.fromiter((ord(u) for u in units), dtype=np.int64, count=len(units))

def _close_row(row: np.ndarray, cols: np.ndarray) -> None:
    """
    Fold the insertion move ``row[j-1] + 1`` into a row of candidates.

    ``min(cand[j], row[j-1] + 1)`` applied left to right equals
    ``j + min(cand[k] - k for k <= j)``, a running minimum numpy computes in
    one pass.
    """
    row[:] = np.minimum.accumulate(row - cols) + cols

def levenshtein_distance(a: str, b: str, buffer: Optional[EditDistanceBuffer] = None) -> int:
    """
    Minimum number of single-unit insertions, deletions and substitutions
    turning ``a`` into ``b``.

    Each DP row is computed with numpy array operations rather than cell by
    cell.

    Args:
        a: Source string
        b: Target string
        buffer: Optional scratch matrix reused across calls

    Returns:
        int: Edit distance; the other string's length when one side is empty
    """
    s, t = text_units(a), text_units(b)
    if not s:
        return len(t)
    if not t:
        return len(s)

    sc, tc = _codes(s), _codes(t)
    cols = np.arange(len(t) + 1)
    M = _edit_matrix(len(s) + 1, len(t) + 1, buffer)
    for i in range(1, len(s) + 1):
        prev, row = M[i - 1], M[i]
        cost = tc != sc[i - 1]
        # deletion vs. substitution, then insertion
        np.minimum(prev[1:] + 1, prev[:-1] + cost, out=row[1:])
        _close_row(row, cols)
    return int(M[len(s), len(t)])

def damerau_levenshtein_distance(a: str, b: str, buffer: Optional[EditDistanceBuffer] = None) -> int:
    """
    Levenshtein distance that also counts a swap of two adjacent units as
    a single edit (optimal string alignment variant).

    Args:
        a: Source string
        b: Target string
        buffer: Optional scratch matrix reused across calls

    Returns:
        int: Edit distance with transpositions
    """
    s, t = text_units(a), text_units(b)
    if not s:
        return len(t)
    if not t:
        return len(s)

    sc, tc = _codes(s), _codes(t)
    cols = np.arange(len(t) + 1)
    M = _edit_matrix(len(s) + 1, len(t) + 1, buffer)
    for i in range(1, len(s) + 1):
        prev, row = M[i - 1], M[i]
        cost = tc != sc[i - 1]
        np.minimum(prev[1:] + 1, prev[:-1] + cost, out=row[1:])
        if i > 1 and len(t) > 1:
            # columns j >= 2 where a[i-1] == b[j-2] and a[i-2] == b[j-1]
            swapped = (tc[:-1] == sc[i - 1]) & (tc[1:] == sc[i - 2])
            transposed = M[i - 2, :-2] + cost[1:]
            np.minimum(row[2:], transposed, out=row[2:], where=swapped)
        _close_row(row, cols)
    return int(M[len(s), len(t)])

def _normalized(distance: int, a: str, b: str) -> float:
    max_len = max(len(text_units(a)), len(text_units(b)))
    if max_len == 0:
        return 1.0
    return 1.0 - distance / max_len

def similarity(a: str, b: str, buffer: Optional[EditDistanceBuffer] = None) -> float:
    """Levenshtein similarity ``1 - distance / max_len``; 1.0 for two empty strings."""
    return _normalized(levenshtein_distance(a, b, buffer), a, b)

def damerau_similarity(a: str, b: str, buffer: Optional[EditDistanceBuffer] = None) -> float:
    """Like ``similarity`` but over the Damerau-Levenshtein distance."""
    return _normalized(damerau_levenshtein_distance(a, b, buffer), a, b)

def _ngrams(units: list, n: int) -> Set[str]:
    return {"".join(units[i:i + n]) for i in range(len(units) - n + 1)}

def ngram_similarity(a: str, b: str, n: int = 3) -> float:
    """
    Case-insensitive Jaccard similarity of the n-gram sets of two strings.

    Strings shorter than ``n`` yield no n-grams, so the comparison falls back
    to exact case-insensitive equality and returns either 1.0 or 0.0.

    Args:
        a: First string
        b: Second string
        n: N-gram length, at least 1

    Returns:
        float: ``|A & B| / |A | B|`` over the n-gram sets, in [0, 1]

    Raises:
        ValueError: If ``n`` is smaller than 1
    """
    if n < 1:
        raise ValueError(f"n-gram length must be at least 1, got {n}")

    a, b = a.lower(), b.lower()
    s, t = text_units(a), text_units(b)
    if len(s) < n or len(t) < n:
        return 1.0 if a == b else 0.0

    grams_a = _ngrams(s, n)
    grams_b = _ngrams(t, n)
    union = grams_a | grams_b
    if not union:
        return 1.0
    return len(grams_a & grams_b) / len(union)
