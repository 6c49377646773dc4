from dataclasses import dataclass, field
from typing import Dict, List, Union

from utils.config import LOCAL_PARAGRAPH_SIZE, MAX_KEY_POINTS, MIN_LOCAL_SENTENCES
from utils.logging import get_logger
from utils.text_processing import (
    rank_sentences,
    score_sentences,
    split_into_paragraphs,
    split_into_sentences,
    word_frequencies,
)

logger = get_logger(__name__)

KEY_POINT_MIN_CHARS = 21
KEY_POINT_MAX_CHARS = 199


@dataclass
class SummaryResult:
    summary: str = ""
    key_points: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Union[str, List[str]]]:
        return {"summary": self.summary, "keyPoints": list(self.key_points)}


def extract_key_points(summary_text: str, max_key_points: int = MAX_KEY_POINTS) -> List[str]:
    """
    Pick the highest scoring sentences of an already produced summary.
    Scores come from the summary's own word frequencies, never the source text.
    """
    sents = split_into_sentences(summary_text)
    scores = score_sentences(sents, word_frequencies(summary_text))
    points: List[str] = []
    for sentence in rank_sentences(scores):
        if len(points) >= max_key_points:
            break
        if KEY_POINT_MIN_CHARS <= len(sentence) <= KEY_POINT_MAX_CHARS and sentence not in points:
            points.append(sentence)
    return points


def summarize_local(text: str, num_sentences: int = MIN_LOCAL_SENTENCES) -> SummaryResult:
    """
    Frequency-based extractive summary over the full text.

    At least MIN_LOCAL_SENTENCES sentences are requested whatever `num_sentences` is.
    Selected sentences keep their salience rank rather than document order and are
    grouped three to a paragraph.
    """
    sents = split_into_sentences(text)
    if not sents:
        logger.info("No qualifying sentences; returning empty summary")
        return SummaryResult()

    scores = score_sentences(sents, word_frequencies(text))
    top = rank_sentences(scores)[:max(num_sentences, MIN_LOCAL_SENTENCES)]
    summary = split_into_paragraphs(top, LOCAL_PARAGRAPH_SIZE)
    logger.debug("Local summary: %d of %d sentences", len(top), len(scores))
    return SummaryResult(summary=summary, key_points=extract_key_points(summary, MAX_KEY_POINTS))
