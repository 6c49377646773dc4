import re
from typing import Dict, FrozenSet, List, Mapping

_SENT_SPLIT = re.compile(r"(?<=[.!?])\s+", re.ASCII)
_WORD_SPLIT = re.compile(r"\W+", re.ASCII)
_NON_ASCII = re.compile(r"[^\x00-\x7F]")

MIN_SENTENCE_CHARS = 21
MIN_TOKEN_CHARS = 3

STOPWORDS: FrozenSet[str] = frozenset({
    "the", "is", "in", "at", "of", "on", "and", "a", "to", "it", "for", "with",
    "as", "was", "were", "by", "an", "be", "this", "that", "from", "or", "are",
    "but", "not", "have", "has", "had", "they", "you", "we", "he", "she", "his",
    "her", "their", "our", "its", "which", "will", "would", "can", "could",
    "should", "may", "might", "do", "does", "did", "so", "if", "then", "than",
    "about", "into", "more", "other", "some", "any", "all", "no", "out", "up",
    "down", "over", "under", "again", "further", "once",
})


def split_into_sentences(text: str) -> List[str]:
    """Sentences ending in . ! or ? followed by whitespace; fragments of 20 chars or less are dropped."""
    if not text:
        return []
    parts = (p.strip() for p in _SENT_SPLIT.split(text))
    return [p for p in parts if len(p) >= MIN_SENTENCE_CHARS]


def tokenize(text: str) -> List[str]:
    return [w for w in _WORD_SPLIT.split(text.lower()) if len(w) >= MIN_TOKEN_CHARS]


def word_frequencies(text: str) -> Dict[str, int]:
    freq: Dict[str, int] = {}
    for word in tokenize(text):
        if word not in STOPWORDS:
            freq[word] = freq.get(word, 0) + 1
    return freq


def score_sentences(sentences: List[str], freq: Mapping[str, int]) -> Dict[str, float]:
    """
    Map each sentence to the summed frequency of its non-stopword tokens.
    Repeated sentences collapse onto their first position.
    """
    scores: Dict[str, float] = {}
    for sentence in sentences:
        if sentence in scores:
            continue
        scores[sentence] = float(sum(freq.get(w, 0) for w in tokenize(sentence) if w not in STOPWORDS))
    return scores


def rank_sentences(scores: Mapping[str, float]) -> List[str]:
    # sorted() is stable with reverse=True, so ties keep their source order
    return sorted(scores, key=lambda s: scores[s], reverse=True)


def split_into_paragraphs(sentences: List[str], per_paragraph: int) -> str:
    """Join sentences with spaces, inserting a blank line after every `per_paragraph`-th one."""
    paragraphs = [
        " ".join(sentences[i:i + per_paragraph])
        for i in range(0, len(sentences), per_paragraph)
    ]
    return "\n\n".join(paragraphs)


def reflow_paragraphs(text: str, max_paragraphs: int = 3) -> str:
    sents = split_into_sentences(text)
    if not sents:
        return text.strip()
    per = max(2, -(-len(sents) // max_paragraphs))
    return split_into_paragraphs(sents, per)


def strip_non_ascii(text: str) -> str:
    return _NON_ASCII.sub("", text)


def split_into_chunks(
    text: str,
    max_chunk_size: int = 500,
    max_chunks: int = 3,
    min_boundary: int = 200,
) -> List[str]:
    """
    Cut `text` into at most `max_chunks` pieces of at most `max_chunk_size` chars.
    A window is shortened to end on its last period when that period sits more
    than `min_boundary` chars into the window. Text past the last chunk is dropped.
    """
    chunks: List[str] = []
    start = 0
    length = len(text)
    while len(chunks) < max_chunks and start < length:
        end = min(start + max_chunk_size, length)
        last_period = text.rfind(".", start, end)
        if last_period > start + min_boundary:
            end = last_period + 1
        chunks.append(text[start:end].strip())
        start = end
    return chunks
