"""
PDF Generator - FastAPI application.

Provides a health check and an HTML/CSS to PDF endpoint backed by a
shared Playwright/Chromium instance.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from . import __version__
from .browser import close_browser
from .config import validate_config_on_startup
from .limits import BodySizeLimitMiddleware, RequestBodyTooLarge, body_too_large_response
from .models import ErrorResponse, HealthResponse, RenderPDFRequest
from .pdf_helpers import DEFAULT_FILENAME, build_content_disposition
from .renderer import generate_pdf

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Validate configuration at startup
settings = validate_config_on_startup()
logging.getLogger().setLevel(settings.log_level)

app = FastAPI(
    title="PDF Generator",
    version=__version__,
    description="HTML to print-faithful PDF rendering using Playwright/Chromium"
)


# Added before CORS so CORS stays outermost and its headers reach 413 responses
app.add_middleware(BodySizeLimitMiddleware, get_limit=lambda: settings.max_body_bytes)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


@app.exception_handler(RequestBodyTooLarge)
async def body_too_large_handler(request: Request, exc: RequestBodyTooLarge):
    """Report a streamed body that passed the limit as 413."""
    return body_too_large_response()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed JSON or wrongly typed fields as 400."""
    details = [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request body", details=details).model_dump(exclude_none=True)
    )


@app.on_event("startup")
async def announce_startup():
    logger.info(f"PDF Generator running on http://{settings.host}:{settings.port}")
    logger.info("Endpoint: POST /api/render-pdf")


@app.on_event("shutdown")
async def shutdown_browser():
    """Close the shared browser context and browser on shutdown."""
    await close_browser()


# ============================================================================
# Health Check Endpoint
# ============================================================================

@app.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Static liveness check, independent of browser state."""
    return HealthResponse()


# ============================================================================
# PDF Generation Endpoint
# ============================================================================

@app.post("/api/render-pdf")
async def render_pdf(request: Optional[RenderPDFRequest] = None):
    """
    Generic HTML/CSS to PDF endpoint.

    Renders the markup as an A4 document with 12mm margins.

    Args:
        request: HTML content, optional filename and optional CSS

    Returns:
        PDF binary data as an attachment

    Errors:
        400 if html is missing, 500 if rendering fails
    """
    if request is None or not request.html:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="HTML content is required").model_dump(exclude_none=True)
        )

    filename = request.filename or DEFAULT_FILENAME

    logger.info(f"Generating: {filename}")
    start_time = time.perf_counter()

    try:
        pdf_bytes = await generate_pdf(request.html, request.css or "")
    except Exception as e:
        logger.error(f"Generation error for {filename}: {e}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="PDF generation failed",
                message=str(e) or "Unknown error"
            ).model_dump(exclude_none=True)
        )

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    logger.info(f"Generated {filename} in {elapsed_ms}ms ({len(pdf_bytes) / 1024:.1f}KB)")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": build_content_disposition(filename),
            "Content-Length": str(len(pdf_bytes)),
        }
    )
