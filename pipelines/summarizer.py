from typing import Optional

from pipelines.extractive_pipeline import SummaryResult, summarize_local
from pipelines.remote_pipeline import HuggingFaceSummarizer, RemoteSuccess
from utils.config import DEFAULT_NUM_SENTENCES, SummarizerConfig
from utils.logging import get_logger

logger = get_logger(__name__)


class DocumentSummarizer:
    """
    Single decision point between the hosted model and the local summarizer.
    The remote path is tried once when a credential is configured; anything
    short of a usable remote result falls through to `summarize_local`.
    """

    def __init__(self, config: SummarizerConfig, remote: Optional[HuggingFaceSummarizer] = None):
        self.config = config
        if remote is None and config.has_credentials:
            remote = HuggingFaceSummarizer(
                api_key=config.api_key,
                endpoint_url=config.endpoint_url,
                timeout=config.timeout,
            )
        self.remote = remote

    def summarize(self, text: str, num_sentences: int = DEFAULT_NUM_SENTENCES) -> SummaryResult:
        if self.remote is not None and self.config.has_credentials:
            logger.info("Using remote summarizer")
            try:
                outcome = self.remote.summarize(text)
            except Exception:
                logger.exception("Remote summarizer raised; falling back to local summarizer")
            else:
                if isinstance(outcome, RemoteSuccess):
                    return outcome.result
                logger.warning("Remote summarizer unavailable (%s); falling back to local summarizer", outcome.reason)
        else:
            logger.info("No API key configured; using local summarizer")

        return summarize_local(text, num_sentences)
