from dataclasses import dataclass
from typing import Any, List, Optional, Union

import requests

from pipelines.extractive_pipeline import SummaryResult, extract_key_points
from utils.config import (
    CHUNK_MIN_BOUNDARY,
    CHUNK_SIZE,
    DEFAULT_ENDPOINT_URL,
    DEFAULT_TIMEOUT_S,
    MAX_CHUNKS,
    MAX_KEY_POINTS,
    REMOTE_MAX_PARAGRAPHS,
)
from utils.logging import get_logger
from utils.text_processing import reflow_paragraphs, split_into_chunks, strip_non_ascii

logger = get_logger(__name__)


@dataclass(frozen=True)
class RemoteSuccess:
    result: SummaryResult


@dataclass(frozen=True)
class RemoteUnavailable:
    reason: str


RemoteOutcome = Union[RemoteSuccess, RemoteUnavailable]


def parse_summary_text(data: Any) -> Optional[str]:
    """Pull `summary_text` out of `[{"summary_text": ...}]` or `{"summary_text": ...}`."""
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        return None
    text = data.get("summary_text")
    if not isinstance(text, str) or not text.strip():
        return None
    return text.strip()


class HuggingFaceSummarizer:
    """Chunked client for a hosted summarization model (Hugging Face Inference API)."""

    def __init__(self, api_key: str, endpoint_url: str = DEFAULT_ENDPOINT_URL, timeout: float = DEFAULT_TIMEOUT_S):
        self.api_key = api_key
        self.endpoint_url = endpoint_url
        self.timeout = timeout

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def summarize_chunk(self, chunk: str, index: int = 0) -> Optional[str]:
        """One POST per chunk. Any transport or parse problem yields None."""
        payload_text = strip_non_ascii(chunk)[:CHUNK_SIZE]
        if not payload_text.strip():
            logger.debug("Chunk %d empty after cleanup; skipped", index)
            return None

        logger.info("Submitting chunk %d (%d chars)", index, len(payload_text))
        try:
            r = requests.post(
                self.endpoint_url,
                json={"inputs": payload_text},
                headers=self._headers(),
                timeout=self.timeout,
            )
            logger.info("Chunk %d response status %s", index, r.status_code)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.warning("Chunk %d request failed: %s", index, e)
            return None
        except ValueError as e:
            logger.warning("Chunk %d returned malformed JSON: %s", index, e)
            return None

        text = parse_summary_text(data)
        if text is None:
            logger.warning("Chunk %d response had no summary_text", index)
        return text

    def summarize(self, text: str) -> RemoteOutcome:
        if not (self.api_key and self.api_key.strip()):
            return RemoteUnavailable("no api key configured")

        chunks = split_into_chunks(text, CHUNK_SIZE, MAX_CHUNKS, CHUNK_MIN_BOUNDARY)
        summaries: List[str] = []
        for i, chunk in enumerate(chunks):
            s = self.summarize_chunk(chunk, i)
            if s:
                summaries.append(s)

        if not summaries:
            return RemoteUnavailable(f"no usable summary from {len(chunks)} chunk(s)")

        summary = reflow_paragraphs("\n\n".join(summaries), REMOTE_MAX_PARAGRAPHS)
        logger.info("Remote summary built from %d of %d chunk(s)", len(summaries), len(chunks))
        return RemoteSuccess(SummaryResult(summary=summary, key_points=extract_key_points(summary, MAX_KEY_POINTS)))
