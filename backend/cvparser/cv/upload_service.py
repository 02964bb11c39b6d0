"""
CV upload service: validation, single-upload guard and partial-data advisory
"""
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

import structlog

from cvparser.core.config import settings
from cvparser.core.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    UploadInProgressError,
)
from cvparser.cv.parser import CVParser, cv_parser
from cvparser.cv.schemas import CVParseResult

logger = structlog.get_logger()

PDF_MAGIC_BYTES = b"%PDF"
PARTIAL_DATA_WARNING = (
    "Partial data extracted. Please review and complete missing information manually."
)
MIN_SECTIONS_FOUND = 2


class UploadGuard:
    """Lets one upload through at a time; others are rejected, not queued"""

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def acquire(self) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise UploadInProgressError()
        try:
            yield
        finally:
            self._lock.release()


def validate_upload(
    content: bytes,
    content_type: Optional[str],
    max_size_bytes: Optional[int] = None,
) -> None:
    """Reject anything that is not a PDF of acceptable size"""
    if max_size_bytes is None:
        max_size_bytes = settings.max_upload_size_bytes

    if "pdf" not in (content_type or "").lower():
        raise InvalidFileTypeError()

    if not content[:4].startswith(PDF_MAGIC_BYTES):
        raise InvalidFileTypeError()

    if len(content) > max_size_bytes:
        raise FileTooLargeError(max_size_mb=max_size_bytes // (1024 * 1024))


class CVUploadService:
    """Validate an uploaded CV and run it through the parser"""

    def __init__(self, parser: Optional[CVParser] = None, guard: Optional[UploadGuard] = None):
        self.parser = parser or cv_parser
        self.guard = guard or UploadGuard()

    def upload_and_parse(
        self,
        content: bytes,
        content_type: Optional[str],
        file_name: Optional[str] = None,
    ) -> CVParseResult:
        with self.guard.acquire():
            validate_upload(content, content_type)

            parsed = self.parser.parse(content)

            warnings: List[str] = []
            if parsed.sections_found() < MIN_SECTIONS_FOUND:
                warnings.append(PARTIAL_DATA_WARNING)

            logger.info(
                "cv_uploaded",
                file_name=file_name,
                size=len(content),
                sections_found=parsed.sections_found(),
            )

            return CVParseResult(
                success=True,
                message="CV uploaded and parsed successfully.",
                data=parsed,
                warnings=warnings or None,
            )


upload_service = CVUploadService()
