"""Resume text extraction from uploaded files.

PDFs go through PyMuPDF (fitz). Plain-text resumes are decoded with an
encoding fallback chain. Anything else is rejected before any LLM call.
"""

import io
from dataclasses import dataclass

from crafter.core.errors import ValidationError
from crafter.core.logging import get_logger

logger = get_logger(__name__)

PDF_EXTENSIONS = {".pdf"}
TEXT_EXTENSIONS = {".txt", ".md"}

PDF_CONTENT_TYPES = ("application/pdf",)
TEXT_CONTENT_TYPE_PREFIXES = ("text/",)

MAX_PDF_PAGES = 20

# Lazy import to avoid loading PyMuPDF at module load
fitz = None


def _get_fitz():
    """Lazy load PyMuPDF."""
    global fitz
    if fitz is None:
        try:
            import fitz as _fitz

            fitz = _fitz
        except ImportError:
            raise ImportError(
                "PyMuPDF (fitz) is required for PDF extraction. "
                "Install with: pip install pymupdf"
            )
    return fitz


@dataclass
class ResumeText:
    """Result of text extraction from a resume upload."""

    text: str
    source_format: str
    page_count: int = 0


def _get_extension(filename: str) -> str:
    """Extract lowercase file extension from filename."""
    if "." in filename:
        return "." + filename.rsplit(".", 1)[-1].lower()
    return ""


def _decode_bytes(raw_bytes: bytes) -> tuple[str, str]:
    """
    Attempt to decode bytes using fallback chain.

    Returns:
        Tuple of (decoded_text, encoding_name)

    Raises:
        ValidationError: If no encoding works
    """
    if raw_bytes.startswith(b"\xef\xbb\xbf"):
        try:
            return raw_bytes.decode("utf-8-sig"), "utf-8-sig"
        except UnicodeDecodeError:
            pass

    for encoding in ("utf-8", "latin-1"):
        try:
            return raw_bytes.decode(encoding), encoding
        except UnicodeDecodeError:
            continue

    raise ValidationError(
        "Unable to decode resume text",
        user_message="Unable to read the resume. Supported encodings: UTF-8, Latin-1.",
    )


def _extract_pdf_text(raw_bytes: bytes) -> tuple[str, int]:
    """Extract text from every page of a PDF, up to MAX_PDF_PAGES."""
    fitz_lib = _get_fitz()
    try:
        doc = fitz_lib.open(stream=io.BytesIO(raw_bytes), filetype="pdf")
    except Exception as e:
        logger.warning(f"Failed to open PDF: {e}")
        raise ValidationError(
            f"Unreadable PDF: {e}",
            user_message="The resume PDF could not be read. It may be corrupted or encrypted.",
        ) from e

    try:
        page_count = min(len(doc), MAX_PDF_PAGES)
        pages = [doc[page_num].get_text() or "" for page_num in range(page_count)]
    finally:
        doc.close()

    return "\n".join(pages).strip(), page_count


def extract_resume_text(
    filename: str,
    content_type: str | None,
    raw_bytes: bytes,
    *,
    max_bytes: int,
    min_chars: int,
) -> ResumeText:
    """
    Extract text content from an uploaded resume.

    Args:
        filename: Original filename
        content_type: MIME content type (may be None)
        raw_bytes: Raw file bytes
        max_bytes: Upload size limit
        min_chars: Minimum extracted characters for a usable resume

    Returns:
        ResumeText with extracted text

    Raises:
        ValidationError: If the file is empty, too large, of an unsupported
            type, or yields too little text
    """
    if not raw_bytes:
        raise ValidationError("Empty resume upload", user_message="Resume file is required")

    if len(raw_bytes) > max_bytes:
        size_mb = len(raw_bytes) / (1024 * 1024)
        limit_mb = max_bytes / (1024 * 1024)
        raise ValidationError(
            f"Resume too large: {len(raw_bytes)} bytes",
            user_message=f"Resume size ({size_mb:.1f} MB) exceeds limit ({limit_mb:.1f} MB)",
        )

    extension = _get_extension(filename)
    content_type_lower = (content_type or "").lower()

    if extension in PDF_EXTENSIONS or content_type_lower.startswith(PDF_CONTENT_TYPES):
        text, page_count = _extract_pdf_text(raw_bytes)
        result = ResumeText(text=text, source_format="pdf", page_count=page_count)
    elif extension in TEXT_EXTENSIONS or content_type_lower.startswith(TEXT_CONTENT_TYPE_PREFIXES):
        text, encoding = _decode_bytes(raw_bytes)
        result = ResumeText(text=text.strip(), source_format=f"text/{encoding}")
    else:
        raise ValidationError(
            f"Unsupported resume type: {extension or content_type or 'unknown'}",
            user_message="Unsupported file type. Upload the resume as PDF, .txt or .md.",
        )

    if len(result.text) < min_chars:
        raise ValidationError(
            f"Too little text extracted from resume ({len(result.text)} chars)",
            user_message=(
                "Too little text could be extracted from the resume. "
                "Scanned PDFs are not supported; upload a text-based PDF."
            ),
        )

    logger.info(
        f"Extracted {len(result.text)} chars from resume",
        extra={"source_format": result.source_format, "page_count": result.page_count},
    )
    return result
