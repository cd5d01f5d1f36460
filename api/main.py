"""
Originality API — Main Application

POST /locate/plagiarism  — Place provider plagiarism snippets in the document
POST /locate/ai          — Place AI-detection sentences and classify them
GET  /health             — Health check

The API is a thin boundary: it decodes provider payloads and hands them to
the pure engine in `originality`. No provider calls, no persistence.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from originality.config import settings
from originality.pipeline import resolve_scan
from originality.ai_sentences import resolve_ai_result
from originality.logging import setup_logging, get_logger
from originality.schemas.scan import (
    PlagiarismScanRequest,
    PlagiarismScanResponse,
    AIDetectionRequest,
    AIDetectionResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Originality API starting",
                extra={"engine_version": settings.ENGINE_VERSION})
    yield
    logger.info("Originality API shutting down")


app = FastAPI(
    title="Originality API",
    description="Match localization and classification for plagiarism and AI-detection results",
    version=settings.ENGINE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "error_type": type(exc).__name__,
               "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The results could not be located."},
    )


# ============================================================
# ROUTES
# ============================================================

@app.post("/locate/plagiarism", response_model=PlagiarismScanResponse)
async def locate_plagiarism(request: PlagiarismScanRequest):
    """Locate provider snippet matches in the scanned document."""
    start = time.time()

    result = resolve_scan(
        request.content_text,
        request.raw_matches,
        query_words=request.query_words,
        cost=request.cost,
        count=request.count,
        all_words_matched=request.all_words_matched,
        all_percent_matched=request.all_percent_matched,
    )

    duration = int((time.time() - start) * 1000)
    logger.info(
        f"Plagiarism matches located: {len(result.located_matches)}/{len(request.raw_matches)}",
        extra={
            "match_count": len(request.raw_matches),
            "located_count": len(result.located_matches),
            "duration_ms": duration,
        },
    )

    return {
        "located_matches": [asdict(m) for m in result.located_matches],
        "summary": asdict(result.summary),
        "verdict": asdict(result.verdict),
        "engine_version": settings.ENGINE_VERSION,
    }


@app.post("/locate/ai", response_model=AIDetectionResponse)
async def locate_ai(request: AIDetectionRequest):
    """Place AI-detection sentences in the document and classify them."""
    start = time.time()

    result = resolve_ai_result(
        request.content_text,
        request.sentences,
        request.overall_generated_probability,
    )

    duration = int((time.time() - start) * 1000)
    logger.info(
        f"AI sentences placed: {len(result.sentences)} ({result.classification})",
        extra={"sentence_count": len(result.sentences), "duration_ms": duration},
    )

    return {
        "overall_score": result.overall_score,
        "classification": result.classification,
        "sentences": [asdict(s) for s in result.sentences],
        "engine_version": settings.ENGINE_VERSION,
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": settings.API_VERSION,
        "engine_version": settings.ENGINE_VERSION,
    }


# --- Body Size Limit Middleware ---
@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject oversized requests — guards both Content-Length and chunked bodies."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > settings.MAX_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={"detail": "Request body too large."},
                )
        except ValueError:
            pass  # Malformed content-length; let the framework handle it

    if request.method in ("POST", "PUT", "PATCH"):
        body = await request.body()
        if len(body) > settings.MAX_BODY_BYTES:
            return JSONResponse(
                status_code=413,
                content={"detail": "Request body too large."},
            )

    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)
