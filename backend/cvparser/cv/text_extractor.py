"""
PDF text extraction with a deadline and error classification
"""
from concurrent.futures import ThreadPoolExecutor, wait
from io import BytesIO
from typing import Callable, Optional

import pdfplumber
import structlog

from cvparser.core.config import settings
from cvparser.core.exceptions import (
    CorruptedPDFError,
    ParsingTimeoutError,
    PasswordProtectedError,
)

logger = structlog.get_logger()

Extractor = Callable[[bytes], str]

_PASSWORD_MARKERS = ("password", "encrypt")


def extract_pdf_text(content: bytes) -> str:
    """Extract text from every page of a PDF held in memory"""
    text_parts = []
    with pdfplumber.open(BytesIO(content)) as pdf:
        for page in pdf.pages:
            text = page.extract_text()
            if text:
                text_parts.append(text)
    return "\n".join(text_parts)


def _is_password_error(error: BaseException) -> bool:
    """Check the error and its causes for an encryption signal"""
    seen = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        description = f"{type(current).__name__} {current}".lower()
        if any(marker in description for marker in _PASSWORD_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


def extract_text(
    content: bytes,
    timeout_ms: Optional[int] = None,
    extractor: Optional[Extractor] = None,
) -> str:
    """
    Run the extractor once, racing it against ``timeout_ms``

    Each call gets its own single-worker executor. When the deadline wins the
    worker is left to finish on its own; its result lands in a future nobody
    reads any more, so it cannot leak into a later call.

    Raises:
        ParsingTimeoutError: the deadline expired first
        PasswordProtectedError: the extractor failed on an encrypted document
        CorruptedPDFError: the extractor failed for any other reason
    """
    if timeout_ms is None:
        timeout_ms = settings.PARSER_TIMEOUT_MS
    extract = extractor or extract_pdf_text

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pdf-extract")
    try:
        future = executor.submit(extract, bytes(content))
        done, _ = wait([future], timeout=timeout_ms / 1000)
        if not done:
            future.cancel()
            logger.warning("text_extraction_timeout", timeout_ms=timeout_ms, size=len(content))
            raise ParsingTimeoutError(details={"timeout_ms": timeout_ms})

        error = future.exception()
        if error is not None:
            if _is_password_error(error):
                logger.warning("text_extraction_password_protected", error=str(error))
                raise PasswordProtectedError() from error
            logger.warning("text_extraction_failed", error=str(error), error_type=type(error).__name__)
            raise CorruptedPDFError() from error

        text = future.result() or ""
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    logger.info("text_extraction_complete", text_length=len(text))
    return text
