"""
CV Parser - FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import structlog

from cvparser.core.config import settings
from cvparser.core.logging_config import configure_logging
from cvparser.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_response,
)
from cvparser.core.exceptions import CVParserException
from cvparser.cv.router import router as cv_router

configure_logging()
logger = structlog.get_logger()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Heuristic CV parsing: skills, work history and education from PDF resumes",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Added last runs first: correlation ID is bound before anything logs
app.add_middleware(ExceptionHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CVParserException)
async def cv_parser_exception_handler(request: Request, exc: CVParserException):
    """Return CV errors as ``{"error": {"code": ..., "message": ...}}``"""
    logger.info("cv_request_rejected", code=exc.code.value, path=request.url.path)
    return error_response(exc)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


app.include_router(cv_router)


@app.on_event("startup")
async def startup_event():
    logger.info(
        "application_starting",
        version=settings.APP_VERSION,
        parser_timeout_ms=settings.PARSER_TIMEOUT_MS,
    )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "cvparser.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
