"""
Render pipeline: HTML in, PDF bytes out.

Loads the composed document into a fresh page of the shared browsing
context, waits for network and fonts, applies the DOM cleanup rules and
exports an A4 PDF with fixed margins.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .browser import BrowserProvider, get_browser_manager
from .cleanup import CleanupRule, apply_cleanup_rules
from .config import get_settings
from .pdf_helpers import build_html_document

logger = logging.getLogger(__name__)

FONTS_READY_SCRIPT = "() => document.fonts.ready.then(() => true)"


class PDFRenderError(Exception):
    """Raised when any step of the render pipeline fails."""


@dataclass(frozen=True)
class PDFOptions:
    """Page geometry for export. The page's own @page size is ignored."""

    format: str = "A4"
    margin: str = "12mm"
    print_background: bool = True
    scale: float = 1
    display_header_footer: bool = False
    prefer_css_page_size: bool = False

    def to_playwright(self) -> Dict[str, Any]:
        """Keyword arguments for page.pdf()."""
        return {
            "format": self.format,
            "print_background": self.print_background,
            "margin": {
                "top": self.margin,
                "bottom": self.margin,
                "left": self.margin,
                "right": self.margin,
            },
            "scale": self.scale,
            "display_header_footer": self.display_header_footer,
            "prefer_css_page_size": self.prefer_css_page_size,
        }


DEFAULT_PDF_OPTIONS = PDFOptions()


async def generate_pdf(
    html: str,
    css: str = "",
    *,
    provider: Optional[BrowserProvider] = None,
    options: PDFOptions = DEFAULT_PDF_OPTIONS,
    rules: Optional[Sequence[CleanupRule]] = None,
    settle_delay_ms: Optional[int] = None,
) -> bytes:
    """
    Render HTML to PDF in a new page of the shared browsing context.

    The page is always closed; the context and browser stay alive for
    the next request.

    Args:
        html: Markup to place in the document body
        css: Optional caller CSS, applied after the built-in stylesheets
        provider: Source of the browsing context (defaults to the shared manager)
        options: PDF export settings
        rules: DOM cleanup rules (defaults to DEFAULT_CLEANUP_RULES)
        settle_delay_ms: Delay between cleanup and export (defaults to settings)

    Returns:
        PDF bytes

    Raises:
        PDFRenderError: If navigation, script evaluation or export fails
    """
    if provider is None:
        provider = get_browser_manager()
    if settle_delay_ms is None:
        settle_delay_ms = get_settings().settle_delay_ms

    try:
        context = await provider.get_context()
        page = await context.new_page()
    except Exception as e:
        raise PDFRenderError(_describe(e)) from e

    try:
        full_html = build_html_document(html, css)
        await page.set_content(full_html, wait_until="networkidle")
        await page.evaluate(FONTS_READY_SCRIPT)

        touched = await apply_cleanup_rules(page, rules)
        logger.debug(f"Cleanup rules touched {touched} elements")

        # No layout-stable signal exists; give style recalculation a moment
        await page.wait_for_timeout(settle_delay_ms)

        return await page.pdf(**options.to_playwright())
    except Exception as e:
        raise PDFRenderError(_describe(e)) from e
    finally:
        await page.close()


def _describe(error: Exception) -> str:
    # asyncio.TimeoutError and friends stringify to ""
    return str(error) or error.__class__.__name__
