"""
SwearCounter API — Main Application

POST /scan         — Scan one message (user, assistant, or both views)
POST /scan/batch   — Batch scan multiple messages
GET  /patterns     — List lexical catalogs (swear, apology, sycophancy)
GET  /vocabulary   — Fuzzy vocabulary and obfuscation bases
GET  /health       — Health check
"""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from swearcounter import __version__
from swearcounter.config import settings
from swearcounter.detector import scan_assistant_message, scan_user_message
from swearcounter.logging import setup_logging, get_logger
from swearcounter.patterns import CATALOGS, describe_catalog
from swearcounter.rules import default_rules
from swearcounter.schemas.scan import (
    ScanRequest,
    ScanBatchRequest,
    ScanResponse,
    ScanBatchResponse,
    PatternsResponse,
    VocabularyResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the rule set once before serving."""
    setup_logging()
    # Request logging middleware replaces the access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    default_rules()
    logger.info("SwearCounter API starting",
                extra={"engine_version": settings.ENGINE_VERSION})
    yield
    logger.info("SwearCounter API shutting down")


app = FastAPI(
    title="SwearCounter API",
    description="Swearing, apology, and sycophancy detection for conversation transcripts",
    version=f"{__version__} (engine {settings.ENGINE_VERSION})",
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
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error. The scan could not be completed.",
        },
    )


# ============================================================
# ROUTES
# ============================================================

def _scan(item: ScanRequest) -> dict:
    rules = default_rules()
    result: dict = {
        "text": item.text,
        "role": item.role,
        "engine_version": settings.ENGINE_VERSION,
    }
    if item.role in ("user", "both"):
        result["user"] = scan_user_message(
            item.text,
            rules,
            fuzzy_threshold=item.fuzzy_threshold,
            semantic_threshold=item.semantic_threshold,
        ).to_dict()
    if item.role in ("assistant", "both"):
        result["assistant"] = scan_assistant_message(item.text, rules).to_dict()
    return result


@app.post("/scan", response_model=ScanResponse)
async def scan_text(request: ScanRequest):
    """Scan one message in a worker thread, like each item of a batch."""
    result = await asyncio.to_thread(_scan, request)
    user = result.get("user")
    logger.info(
        "Scan complete",
        extra={
            "role": request.role,
            "text_length": len(request.text),
            "frustration_intensity": user["frustration_intensity"] if user else None,
        },
    )
    return result


@app.post("/scan/batch", response_model=ScanBatchResponse)
async def scan_batch(request: ScanBatchRequest):
    """Batch scan; each message is scored independently in a worker thread."""
    results = await asyncio.gather(
        *[asyncio.to_thread(_scan, item) for item in request.items]
    )
    logger.info("Batch scan complete", extra={"items": len(results)})
    return {"results": results, "total": len(results)}


@app.get("/patterns", response_model=PatternsResponse)
async def get_patterns(
    catalog: str = Query("all", pattern="^(swear|apology|sycophancy|all)$"),
):
    """Return the lexical rules of one catalog, or all of them."""
    names = list(CATALOGS) if catalog == "all" else [catalog]
    patterns = [p for name in names for p in describe_catalog(name)]
    return {"catalog": catalog, "total": len(patterns), "patterns": patterns}


@app.get("/vocabulary", response_model=VocabularyResponse)
async def get_vocabulary():
    rules = default_rules()
    return {
        "vocabulary": list(rules.vocabulary),
        "obfuscation_bases": [p.base for p in rules.obfuscation_patterns],
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    rules = default_rules()
    return {
        "status": "operational",
        "version": __version__,
        "engine_version": settings.ENGINE_VERSION,
        "swear_patterns": len(rules.swear_patterns),
        "apology_patterns": len(rules.apology_patterns),
        "sycophancy_patterns": len(rules.sycophancy_patterns),
        "vocabulary_size": len(rules.vocabulary),
    }


# --- Version Headers Middleware ---
@app.middleware("http")
async def add_version_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-SwearCounter-Version"] = __version__
    response.headers["X-Engine-Version"] = settings.ENGINE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


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
