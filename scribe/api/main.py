import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scribe.api.models import ErrorResponse
from scribe.api.routes.transcribe import router as transcribe_router
from scribe.transcription.errors import TranscriptionError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Scribe API",
    description="Audio transcription with word timestamps and speaker diarization",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:8501",
    ],
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transcribe_router)


@app.exception_handler(TranscriptionError)
async def transcription_error_handler(request: Request, exc: TranscriptionError) -> JSONResponse:
    logger.warning("%s %s failed (%d): %s", request.method, request.url.path, exc.status_code, exc)
    body = ErrorResponse(error=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
