"""
CV upload routes
"""
from typing import Optional
from fastapi import APIRouter, File, UploadFile
import structlog

from cvparser.core.exceptions import NoFileError
from cvparser.cv.schemas import CVParseResult
from cvparser.cv.upload_service import upload_service

router = APIRouter(prefix="/api/v1/cv", tags=["CV"])
logger = structlog.get_logger()


@router.post("/upload", response_model=CVParseResult)
def upload_cv(file: Optional[UploadFile] = File(None)):
    """Upload a PDF CV and return the parsed data"""
    if file is None:
        raise NoFileError()

    content = file.file.read()
    logger.info("cv_upload_received", file_name=file.filename, size=len(content))

    return upload_service.upload_and_parse(
        content,
        file.content_type,
        file_name=file.filename,
    )
