"""
Tests for upload validation, the single-upload guard and the upload service
"""
import pytest

from cvparser.core.exceptions import (
    CorruptedPDFError,
    CVErrorCode,
    FileTooLargeError,
    InvalidFileTypeError,
    UploadInProgressError,
)
from cvparser.cv.parser import CVParser
from cvparser.cv.upload_service import (
    PARTIAL_DATA_WARNING,
    CVUploadService,
    UploadGuard,
    validate_upload,
)
from tests.conftest import static_extractor

PDF = b"%PDF-1.4 minimal"


class TestValidateUpload:

    def test_accepts_pdf(self):
        validate_upload(PDF, "application/pdf")

    @pytest.mark.parametrize("content_type", ["text/plain", "image/png", None])
    def test_rejects_other_content_types(self, content_type):
        with pytest.raises(InvalidFileTypeError) as exc_info:
            validate_upload(PDF, content_type)

        assert exc_info.value.code == CVErrorCode.INVALID_FILE_TYPE

    def test_rejects_content_without_pdf_header(self):
        with pytest.raises(InvalidFileTypeError):
            validate_upload(b"PK\x03\x04 zip archive", "application/pdf")

    def test_rejects_oversized_file(self):
        content = PDF + b"0" * (2 * 1024 * 1024)

        with pytest.raises(FileTooLargeError) as exc_info:
            validate_upload(content, "application/pdf", max_size_bytes=1024 * 1024)

        assert exc_info.value.code == CVErrorCode.FILE_TOO_LARGE
        assert exc_info.value.details == {"max_size_mb": 1}


class TestUploadGuard:

    def test_second_upload_is_rejected_while_busy(self):
        guard = UploadGuard()

        with guard.acquire():
            assert guard.busy
            with pytest.raises(UploadInProgressError):
                with guard.acquire():
                    pass

        assert not guard.busy

    def test_released_after_failure(self):
        guard = UploadGuard()

        with pytest.raises(RuntimeError):
            with guard.acquire():
                raise RuntimeError("boom")

        assert not guard.busy


class TestCVUploadService:

    def test_full_cv_has_no_warnings(self, sample_cv):
        service = CVUploadService(parser=CVParser(extractor=static_extractor(sample_cv)))

        result = service.upload_and_parse(PDF, "application/pdf", file_name="cv.pdf")

        assert result.success is True
        assert result.warnings is None
        assert len(result.data.work_history) == 2

    def test_partial_data_warning(self):
        text = "Skills:\nPython, Django, PostgreSQL\nExperience:\n" + "Hobbies include chess. " * 5
        service = CVUploadService(parser=CVParser(extractor=static_extractor(text)))

        result = service.upload_and_parse(PDF, "application/pdf")

        assert result.success is True
        assert result.warnings == [PARTIAL_DATA_WARNING]
        assert result.data.skills == ["Python", "Django", "PostgreSQL"]

    def test_invalid_upload_is_not_parsed(self):
        def extractor(content: bytes) -> str:
            raise AssertionError("parser should not run")

        service = CVUploadService(parser=CVParser(extractor=extractor))

        with pytest.raises(InvalidFileTypeError):
            service.upload_and_parse(b"hello", "text/plain")

        assert not service.guard.busy

    def test_guard_released_after_parse_failure(self):
        def extractor(content: bytes) -> str:
            raise ValueError("bad stream")

        service = CVUploadService(parser=CVParser(extractor=extractor))

        with pytest.raises(CorruptedPDFError):
            service.upload_and_parse(PDF, "application/pdf")

        assert not service.guard.busy

    def test_rejects_while_another_upload_runs(self, sample_cv):
        service = CVUploadService(parser=CVParser(extractor=static_extractor(sample_cv)))

        with service.guard.acquire():
            with pytest.raises(UploadInProgressError):
                service.upload_and_parse(PDF, "application/pdf")
