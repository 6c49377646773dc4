from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_ENDPOINT_URL = "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"
DEFAULT_TIMEOUT_S = 10.0

# chunking limits of the hosted model
CHUNK_SIZE = 500
MAX_CHUNKS = 3
CHUNK_MIN_BOUNDARY = 200

MAX_KEY_POINTS = 7
MIN_LOCAL_SENTENCES = 10
LOCAL_PARAGRAPH_SIZE = 3
REMOTE_MAX_PARAGRAPHS = 3
DEFAULT_NUM_SENTENCES = 5


@dataclass(frozen=True)
class SummarizerConfig:
    api_key: Optional[str] = None
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout: float = DEFAULT_TIMEOUT_S

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def __repr__(self) -> str:
        key = "***" if self.has_credentials else None
        return f"SummarizerConfig(api_key={key!r}, endpoint_url={self.endpoint_url!r}, timeout={self.timeout!r})"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SummarizerConfig":
        """Build from HUGGINGFACE_API_KEY / HF_SUMMARIZATION_URL / HF_TIMEOUT_SECONDS (.env is read first)."""
        if environ is None:
            load_dotenv(PROJECT_ROOT / ".env")
            environ = os.environ

        api_key = (environ.get("HUGGINGFACE_API_KEY") or "").strip() or None
        endpoint_url = (environ.get("HF_SUMMARIZATION_URL") or "").strip() or DEFAULT_ENDPOINT_URL
        raw_timeout = (environ.get("HF_TIMEOUT_SECONDS") or "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_S
        except ValueError:
            raise ValueError(f"HF_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError("HF_TIMEOUT_SECONDS must be positive")
        return cls(api_key=api_key, endpoint_url=endpoint_url, timeout=timeout)
