"""
Data Extraction Module.

Converts uploaded resume documents (PDF or plain text) and job
description files into plain text for keyword matching.
"""

import io
import logging
from pathlib import Path
from typing import Optional

import pdfplumber

from src.errors import DecodeError, EmptyTextError

logger = logging.getLogger("resume_checker.data_extraction")

PDF_CONTENT_TYPE = "application/pdf"


def extract_text_from_pdf(source: str | Path | bytes) -> str:
    """
    Extract text content from a PDF.

    Args:
        source: Path to a PDF file or the raw PDF bytes.

    Returns:
        Extracted text content, pages separated by blank lines.
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    text_content = []

    with pdfplumber.open(source) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_content.append(page_text)

    return "\n\n".join(text_content)


def is_pdf(filename: Optional[str], content_type: Optional[str] = None) -> bool:
    """Decide whether an upload should be parsed as PDF."""
    if content_type and content_type.split(";")[0].strip().lower() == PDF_CONTENT_TYPE:
        return True
    return bool(filename) and filename.lower().endswith(".pdf")


def decode_document(
    filename: Optional[str],
    data: bytes,
    content_type: Optional[str] = None,
) -> str:
    """
    Decode an uploaded resume into text.

    PDFs are parsed with pdfplumber; anything else is read as UTF-8 with
    invalid bytes replaced.

    Args:
        filename: Original file name.
        data: Raw file content.
        content_type: MIME type reported by the client, if any.

    Returns:
        Decoded text (never blank).

    Raises:
        DecodeError: If the PDF could not be parsed.
        EmptyTextError: If decoding produced no usable text.
    """
    if is_pdf(filename, content_type):
        try:
            text = extract_text_from_pdf(data)
        except Exception as e:
            logger.warning("PDF parse failed file=%s error=%s", filename, e, exc_info=True)
            raise DecodeError(detail=str(e)) from e
        logger.info("PDF parsed file=%s chars=%s", filename, len(text))
    else:
        text = data.decode("utf-8", errors="replace")

    if not text.strip():
        raise EmptyTextError()

    return text


def read_document(path: str | Path) -> str:
    """
    Read a resume document from disk.

    Args:
        path: Path to a PDF or text file.

    Returns:
        Decoded text.

    Raises:
        FileNotFoundError: If the file does not exist.
        DecodeError: If the PDF could not be parsed.
        EmptyTextError: If the file holds no usable text.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    return decode_document(path.name, path.read_bytes())


def read_job_description(path: str | Path) -> str:
    """Read a plain-text job description file."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Job description file not found: {path}")

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()
