"""FastAPI application entrypoint for docfreq service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import DEFAULT_MAX_UPLOAD_BYTES, DocFreqConfig, load_config
from ..errors import (
    AnalysisNotFoundError,
    DecodeError,
    ReadError,
    UnsupportedMediaTypeError,
)
from ..ingestion import DocumentIngestor
from ..logging import get_logger
from ..stores import AnalysisStore


class UploadResponse(BaseModel):
    id: str


class WordFrequencyModel(BaseModel):
    word: str
    frequency: int


class AnalysisResponse(BaseModel):
    id: str
    frequencies: List[WordFrequencyModel]


class HealthResponse(BaseModel):
    status: str


def create_app(
    config: DocFreqConfig | None = None,
    *,
    store: AnalysisStore | None = None,
    ingestor: DocumentIngestor | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing upload and retrieval routes.

    The store is created here once and shared by every request handled by
    the returned app.
    """
    max_upload_bytes = config.upload.max_bytes if config else DEFAULT_MAX_UPLOAD_BYTES
    if ingestor is None:
        ignore_page_errors = config.pdf.ignore_page_errors if config else True
        ingestor = DocumentIngestor(
            store or AnalysisStore(), ignore_page_errors=ignore_page_errors
        )
    logger = get_logger("service")
    app = FastAPI(title="DocFreq Service", version="1.0.0")
    app.state.ingestor = ingestor
    app.state.store = ingestor.store

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/api/upload", response_model=UploadResponse)
    async def upload(file: Optional[UploadFile] = File(None)) -> UploadResponse:
        if file is None:
            raise HTTPException(status_code=400, detail="Error retrieving file")

        try:
            content = await file.read(max_upload_bytes + 1)
        except OSError as exc:
            raise ReadError(f"Error reading file content: {exc}") from exc
        finally:
            await file.close()
        if len(content) > max_upload_bytes:
            raise HTTPException(status_code=400, detail="File too large")

        media_type = file.content_type

        def _run_ingest() -> str:
            return ingestor.ingest(content, media_type)

        loop = asyncio.get_running_loop()
        identifier = await loop.run_in_executor(None, _run_ingest)
        return UploadResponse(id=identifier)

    @app.get("/api/analysis/{analysis_id}", response_model=AnalysisResponse)
    async def get_analysis(analysis_id: str) -> AnalysisResponse:
        analysis = ingestor.get(analysis_id)
        return AnalysisResponse.model_validate(analysis.to_dict())

    @app.exception_handler(AnalysisNotFoundError)
    async def not_found_handler(_: Request, exc: AnalysisNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": "Analysis not found"})

    @app.exception_handler(UnsupportedMediaTypeError)
    async def media_type_handler(
        _: Request, exc: UnsupportedMediaTypeError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(DecodeError)
    async def decode_error_handler(_: Request, exc: DecodeError) -> JSONResponse:
        logger.warning("Rejected malformed PDF upload: %s", exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ReadError)
    async def read_error_handler(_: Request, exc: ReadError) -> JSONResponse:
        logger.error("Upload could not be read: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Error reading file content"})

    return app


def run_service(config: DocFreqConfig | None = None) -> None:  # pragma: no cover - integration path
    import uvicorn

    if config is None:
        config = load_config(Path.cwd())
    logger = get_logger("service")
    logger.info("Server starting on %s:%d", config.server.host, config.server.port)
    app = create_app(config)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


__all__ = ["create_app", "run_service"]
