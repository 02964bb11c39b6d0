"""
Custom exception classes for the CV parser
"""
from enum import Enum
from typing import Optional, Dict, Any


class CVErrorCode(str, Enum):
    """Error codes surfaced verbatim to API clients"""

    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    PASSWORD_PROTECTED = "PASSWORD_PROTECTED"
    CORRUPTED_PDF = "CORRUPTED_PDF"
    PARSING_TIMEOUT = "PARSING_TIMEOUT"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    UPLOAD_IN_PROGRESS = "UPLOAD_IN_PROGRESS"
    NO_FILE = "NO_FILE"


class CVParserException(Exception):
    """Base exception for the CV parser"""

    def __init__(
        self,
        message: str,
        code: CVErrorCode,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class CVParsingError(CVParserException):
    """Document could not be turned into parsed CV data"""


class ParsingTimeoutError(CVParsingError):
    """Text extraction exceeded its deadline"""

    def __init__(
        self,
        message: str = "PDF processing timed out. Please try a smaller file.",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, CVErrorCode.PARSING_TIMEOUT, details=details)


class PasswordProtectedError(CVParsingError):
    """Text extraction failed because the PDF is encrypted"""

    def __init__(
        self,
        message: str = "Cannot process password-protected PDFs. Please upload an unprotected file.",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, CVErrorCode.PASSWORD_PROTECTED, details=details)


class CorruptedPDFError(CVParsingError):
    """Text extraction failed for any other reason"""

    def __init__(
        self,
        message: str = "Unable to read PDF file. Please ensure the file is not corrupted.",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, CVErrorCode.CORRUPTED_PDF, details=details)


class InsufficientDataError(CVParsingError):
    """Extraction succeeded but produced too little text (scanned document)"""

    def __init__(
        self,
        message: str = (
            "Limited text could be extracted. This appears to be a scanned document. "
            "Please upload a text-based PDF or enter information manually."
        ),
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, CVErrorCode.INSUFFICIENT_DATA, details=details)


class UploadValidationError(CVParserException):
    """Uploaded file rejected before parsing"""


class InvalidFileTypeError(UploadValidationError):

    def __init__(self, message: str = "Invalid file type. Please upload a PDF file."):
        super().__init__(message, CVErrorCode.INVALID_FILE_TYPE)


class FileTooLargeError(UploadValidationError):

    def __init__(self, max_size_mb: int):
        super().__init__(
            f"File too large. Maximum size is {max_size_mb}MB.",
            CVErrorCode.FILE_TOO_LARGE,
            details={"max_size_mb": max_size_mb},
        )


class NoFileError(UploadValidationError):

    def __init__(self, message: str = "No file uploaded. Please select a PDF file."):
        super().__init__(message, CVErrorCode.NO_FILE)


class UploadInProgressError(CVParserException):
    """Another upload is still being processed"""

    def __init__(self, message: str = "Please wait for the current upload to complete."):
        super().__init__(message, CVErrorCode.UPLOAD_IN_PROGRESS)
