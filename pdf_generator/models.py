"""
Pydantic models for the PDF generator API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .pdf_helpers import DEFAULT_FILENAME


class RenderPDFRequest(BaseModel):
    """HTML/CSS to PDF request."""

    html: Optional[str] = Field(None, description="HTML content to render (required)")
    filename: Optional[str] = Field(
        DEFAULT_FILENAME, description="Filename for the Content-Disposition header"
    )
    css: Optional[str] = Field("", description="Additional CSS applied after the built-in styles")

    @field_validator("html", mode="before")
    @classmethod
    def coerce_scalar_html(cls, v):
        """
        Accept numbers and booleans as markup.

        Falsy scalars (0, false) become "" so they count as missing html.
        Objects and arrays are left for type validation to reject.
        """
        if isinstance(v, bool):
            return "true" if v else ""
        if isinstance(v, (int, float)):
            return str(v) if v else ""
        return v


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    service: str = "pdf-generator"


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""
    error: str
    message: Optional[str] = None
    details: Optional[List[dict]] = None
