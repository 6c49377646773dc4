from pathlib import Path
import shutil
import tempfile

from fastapi import FastAPI, UploadFile, File, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from app.extract_text import extract_text
from pipelines.summarizer import DocumentSummarizer
from utils.config import DEFAULT_NUM_SENTENCES, SummarizerConfig
from utils.logging import get_logger, setup_logger

setup_logger()
logger = get_logger(__name__)

MIN_TEXT_CHARS = 10

app = FastAPI(title="Document Summarizer (Hugging Face → local extractive fallback)")

# CORS (optional)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SummarizeRequest(BaseModel):
    text: str
    num_sentences: int = Field(DEFAULT_NUM_SENTENCES, ge=1)


class SummarizeResponse(BaseModel):
    summary: str
    keyPoints: list[str]


@app.on_event("startup")
def _startup():
    # tests may inject their own summarizer before startup
    if getattr(app.state, "summarizer", None) is None:
        app.state.summarizer = DocumentSummarizer(SummarizerConfig.from_env())


def get_summarizer(request: Request) -> DocumentSummarizer:
    summarizer = getattr(request.app.state, "summarizer", None)
    if summarizer is None:
        raise HTTPException(status_code=500, detail="Summarizer service not initialized")
    return summarizer


def _summarize(request: Request, text: str, num_sentences: int) -> SummarizeResponse:
    if not text or len(text.strip()) < MIN_TEXT_CHARS:
        raise HTTPException(status_code=400, detail="No extractable content found.")
    result = get_summarizer(request).summarize(text, num_sentences)
    return SummarizeResponse(summary=result.summary, keyPoints=result.key_points)


@app.get("/api/health")
def health():
    return {"ok": True}


@app.post("/api/summarize", response_model=SummarizeResponse)
def summarize(body: SummarizeRequest, request: Request):
    return _summarize(request, body.text, body.num_sentences)


# plain def: extraction and the remote calls block, so this runs in the threadpool
@app.post("/api/summarize/file", response_model=SummarizeResponse)
def summarize_file(request: Request, file: UploadFile = File(...), num_sentences: int = DEFAULT_NUM_SENTENCES):
    if not file or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded.")

    suffix = Path(file.filename).suffix.lower()
    with tempfile.TemporaryDirectory() as tmp_dir:
        dst = Path(tmp_dir) / f"upload{suffix}"
        try:
            with open(dst, "wb") as f:
                shutil.copyfileobj(file.file, f)
        except OSError as e:
            raise HTTPException(status_code=500, detail=f"Failed to save upload: {e}")

        try:
            text = extract_text(dst, file.content_type)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.exception("Text extraction failed for %s", file.filename)
            raise HTTPException(status_code=400, detail=f"Failed to extract text: {e}")

    return _summarize(request, text, num_sentences)
