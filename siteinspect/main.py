# siteinspect/main.py

from __future__ import annotations

import json
import logging
import secrets
import time
from datetime import datetime

import sentry_sdk
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .config import ALLOWED_ORIGINS, LOG_LEVEL, MAX_QR_IMAGE_BYTES, SENTRY_DSN
from .errors import InvalidUrl, MissingInput
from .fetcher import normalize_url
from .models import QrContentRequest, UrlAnalysisRequest
from .qr_scanner import analyze_qr_content, decode_qr_image
from .website_analyzer import analyze_scanned_content, analyze_url, looks_like_url

if SENTRY_DSN:
    sentry_sdk.init(dsn=SENTRY_DSN, traces_sample_rate=0.2)

logger = logging.getLogger("siteinspect")
logging.basicConfig(level=LOG_LEVEL, format="%(message)s")

app = FastAPI(title="Website & QR Analyzer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(json.dumps({"event": "error", "path": str(request.url), "error": str(exc)}))
    return JSONResponse({"error": "Internal server error."}, status_code=500)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({"error": "Invalid request.", "detail": exc.errors()}, status_code=422)


@app.middleware("http")
async def request_log(request: Request, call_next):
    request_id = secrets.token_hex(8)
    start_time = time.time()
    response = await call_next(request)
    duration = round((time.time() - start_time) * 1000, 2)
    logger.info(
        json.dumps(
            {
                "event": "request",
                "request_id": request_id,
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "duration_ms": duration,
            }
        )
    )
    response.headers["X-Request-ID"] = request_id
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


# ---------------------------------------------------------
# HEALTH
# ---------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "Server is running!", "time": datetime.now().strftime("%Y-%m-%d %H:%M:%S")}


# ---------------------------------------------------------
# ANALYZE / QR
# ---------------------------------------------------------
@app.post("/analyze")
def analyze(body: UrlAnalysisRequest):
    if not body.url:
        return JSONResponse({"error": "Please provide a URL"}, status_code=400)

    try:
        analyzed_url = normalize_url(body.url)
        analysis = analyze_url(analyzed_url)
    except InvalidUrl as exc:
        logger.info(json.dumps({"event": "invalid_url", "url": body.url}))
        return JSONResponse(
            {"error": "Could not analyze website", "message": str(exc)}, status_code=400
        )

    return {"success": True, "analysis": analysis.to_json(), "analyzedUrl": analyzed_url}


@app.post("/analyze-qr")
def analyze_qr(body: QrContentRequest):
    try:
        analysis = analyze_qr_content(body.content)
    except MissingInput:
        return JSONResponse({"error": "Please provide content"}, status_code=400)

    return {"success": True, "analysis": analysis.to_json()}


@app.post("/qr")
async def qr(request: Request, image: UploadFile = File(...)):
    max_mb = MAX_QR_IMAGE_BYTES // (1024 * 1024)
    too_large = JSONResponse({"error": f"Image too large. Max {max_mb}MB."}, status_code=413)

    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_QR_IMAGE_BYTES:
        return too_large

    img_bytes = await image.read()
    if len(img_bytes) > MAX_QR_IMAGE_BYTES:
        return too_large

    content = await run_in_threadpool(decode_qr_image, img_bytes)
    if not content:
        return JSONResponse({"error": "No QR code detected in the image."}, status_code=422)

    try:
        analysis = await run_in_threadpool(analyze_scanned_content, content)
    except (InvalidUrl, MissingInput) as exc:
        return JSONResponse(
            {"error": "Could not analyze QR content", "message": str(exc)}, status_code=400
        )

    return {
        "success": True,
        "content": content,
        "category": "url" if looks_like_url(content) else "qr",
        "analysis": analysis.to_json(),
    }
