"""Deterministic locale-aware sentence and word segmenter."""

import re
from typing import List, Optional
from ..core.abc import Logger
from ..core.types import Segment
from ..core.util import primary_subtag

CJK_LANGUAGES = frozenset({"ja", "zh", "ko"})

SENTENCE_TERMINATORS = frozenset(".!?。！？")

CJK_PUNCTUATION = frozenset(
    "。！？，、；：「」『』（）【】《》〈〉“”‘’・…"
    ".!?,;:()[]{}<>\"'"
)

# Whitespace runs and ,;:"'()[] separate words in space-delimited scripts
_WESTERN_WORD_SPLIT = re.compile(r"[\s,;:\"'()\[\]]+")

class Segmenter:
    """
    Rule-based segmenter for translation units.

    Japanese, Chinese and Korean use character-level rules; every other locale
    uses punctuation-plus-capital heuristics for sentences and whitespace /
    punctuation splitting for words. This is not full Unicode text
    segmentation: "approx. five" stays one sentence, "Mr. Smith" does not.
    """

    def __init__(self, locale: str = "en", logger: Optional[Logger] = None):
        """
        Initialize segmenter.

        Args:
            locale: Primary language subtag, kept verbatim
            logger: Optional structured logger
        """
        self.locale = locale
        self.log = logger

    @classmethod
    def from_string(cls, locale_tag: str, logger: Optional[Logger] = None) -> "Segmenter":
        """Create a segmenter from a full locale tag such as ``"zh-Hant-TW"``."""
        return cls(primary_subtag(locale_tag), logger=logger)

    @property
    def is_cjk(self) -> bool:
        return self.locale.lower() in CJK_LANGUAGES

    def segment_sentences(self, text: str) -> List[str]:
        """
        Split text into sentences.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Stripped, non-empty sentences in text order, each
            keeping its terminating punctuation
        """
        if self.is_cjk:
            return self._cjk_sentences(text)
        return self._western_sentences(text)

    def _cjk_sentences(self, text: str) -> List[str]:
        sentences = []
        current = []
        for ch in text:
            current.append(ch)
            if ch in SENTENCE_TERMINATORS:
                sentence = "".join(current).strip()
                if sentence:
                    sentences.append(sentence)
                current = []

        rest = "".join(current).strip()
        if rest:
            sentences.append(rest)
        return sentences

    def _western_sentences(self, text: str) -> List[str]:
        sentences = []
        current = []
        n = len(text)
        for i, ch in enumerate(text):
            current.append(ch)
            if ch not in SENTENCE_TERMINATORS:
                continue

            if i + 1 >= n:
                boundary = True
            elif text[i + 1] == "\n":
                boundary = True
            elif text[i + 1] == " ":
                # Only a capital letter opens a new sentence after the space
                boundary = i + 2 >= n or "A" <= text[i + 2] <= "Z"
            else:
                boundary = False

            if boundary:
                sentence = "".join(current).strip()
                if sentence:
                    sentences.append(sentence)
                current = []

        rest = "".join(current).strip()
        if rest:
            sentences.append(rest)
        return sentences

    def segment_words(self, text: str) -> List[str]:
        """
        Split text into words.

        CJK text yields one word per non-punctuation character. Other text is
        split on whitespace and ``,;:"'()[]``, with sentence punctuation
        trimmed from both ends of each word.
        """
        if self.is_cjk:
            return [ch for ch in text if not ch.isspace() and ch not in CJK_PUNCTUATION]

        words = []
        for token in _WESTERN_WORD_SPLIT.split(text):
            token = token.strip(".!?")
            if token:
                words.append(token)
        return words

    def sentence_count(self, text: str) -> int:
        return len(self.segment_sentences(text))

    def word_count(self, text: str) -> int:
        return len(self.segment_words(text))

    def char_count(self, text: str) -> int:
        """Number of non-whitespace characters."""
        return sum(1 for ch in text if not ch.isspace())

    def segment_sentences_with_positions(self, text: str) -> List[Segment]:
        """Sentences with their offsets in ``text``; see ``_locate``."""
        return self._locate(text, self.segment_sentences(text), kind="sentence")

    def segment_words_with_positions(self, text: str) -> List[Segment]:
        """Words with their offsets in ``text``; see ``_locate``."""
        return self._locate(text, self.segment_words(text), kind="word")

    def _locate(self, text: str, pieces: List[str], kind: str) -> List[Segment]:
        """
        Find each piece in text with a cursor that only moves forward.

        A piece that does not occur at or after the end of the previous one
        is left out of the result.
        """
        located = []
        cursor = 0
        for piece in pieces:
            start = text.find(piece, cursor)
            if start < 0:
                if self.log:
                    self.log.warn("segment_not_located", kind=kind, segment=piece, cursor=cursor)
                continue
            end = start + len(piece)
            located.append(Segment(text=piece, start=start, end=end))
            cursor = end
        return located
