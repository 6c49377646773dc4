from pathlib import Path
from typing import Union
from pypdf import PdfReader
from docx import Document
import re

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt")

def _clean(txt: str) -> str:
    # normalize whitespace
    return re.sub(r"\s+", " ", (txt or "")).strip()

def extract_text_from_pdf(file_path: Union[str, Path]) -> str:
    reader = PdfReader(str(file_path))
    return _clean(" ".join(page.extract_text() or "" for page in reader.pages))

def extract_text_from_docx(file_path: Union[str, Path]) -> str:
    doc = Document(str(file_path))
    return _clean("\n".join(p.text for p in doc.paragraphs))

def extract_text_from_txt(file_path: Union[str, Path]) -> str:
    return _clean(Path(file_path).read_text(encoding="utf-8", errors="replace"))

def extract_text(file_path: Union[str, Path], content_type: str | None = None) -> str:
    """Plain text of a .pdf, .docx or .txt document; anything else is a ValueError."""
    file_path = Path(file_path)
    suffix = file_path.suffix.lower()

    if suffix == ".pdf" or (content_type and "pdf" in content_type):
        return extract_text_from_pdf(file_path)
    if suffix == ".docx" or (content_type and "wordprocessingml" in content_type):
        return extract_text_from_docx(file_path)
    if suffix == ".txt" or (content_type and content_type.startswith("text/")):
        return extract_text_from_txt(file_path)

    raise ValueError(f"Unsupported document type: {suffix or content_type or 'unknown'}")
