import io
from pathlib import PurePath

import pdfplumber
from docx import Document

from models.requests import CVDocument

SUPPORTED_EXTENSIONS = frozenset({".pdf", ".docx", ".txt"})


class UnsupportedDocumentError(ValueError):
    pass


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace").strip()


def file_extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lower()


def extract_text(file_name: str, data: bytes) -> str:
    """Extract text from an uploaded CV, choosing the reader by file extension."""
    ext = file_extension(file_name)
    if ext == ".pdf":
        return extract_text_pdf(data)
    if ext == ".docx":
        return extract_text_docx(data)
    if ext == ".txt":
        return extract_text_plain(data)
    raise UnsupportedDocumentError(
        f"Unsupported file type {ext or '(none)'}; expected one of "
        + ", ".join(sorted(SUPPORTED_EXTENSIONS))
    )


def build_cv_document(file_name: str, data: bytes, max_chars: int) -> CVDocument:
    """Extract and truncate CV text into a CVDocument."""
    content = extract_text(file_name, data)
    return CVDocument(file_name=file_name, content=content[:max_chars])
