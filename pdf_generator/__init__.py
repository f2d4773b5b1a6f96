"""
PDF Generator - HTML to print-faithful PDF service.

Renders arbitrary HTML/CSS in headless Chromium via Playwright and returns
an A4 PDF with fixed 12mm margins, suitable for contracts and invoices.
"""

__version__ = "0.1.0"
