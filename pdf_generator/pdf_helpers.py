"""
Helper functions for PDF generation.

Builds the complete HTML document handed to Chromium and the response
headers for the rendered file.
"""

from urllib.parse import quote

from .styles import BASE_CSS, PRINT_CSS

DEFAULT_FILENAME = "document.pdf"

# Characters JavaScript's encodeURIComponent leaves untouched besides
# ASCII letters, digits and "_.-"
_URI_COMPONENT_SAFE = "!~*'()"


def encode_filename(filename: str) -> str:
    """
    Percent-encode a filename for use inside a Content-Disposition header.

    Matches encodeURIComponent: quotes, semicolons, commas, slashes and
    non-ASCII characters are escaped so they cannot break header parsing.

    Example:
        >>> encode_filename("Invoice #12; final.pdf")
        "Invoice%20%2312%3B%20final.pdf"
    """
    return quote(filename, safe=_URI_COMPONENT_SAFE)


def build_content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition value for the given filename."""
    return f'attachment; filename="{encode_filename(filename)}"'


def build_html_document(
    content_html: str,
    additional_css: str = "",
    lang: str = "bg",
    title: str = "Document"
) -> str:
    """
    Build complete HTML document for PDF generation with embedded styles.

    Stylesheets are emitted in cascade order:
    - Base reset and utility classes
    - Print-media overrides
    - Caller-supplied CSS (last, so it can override both)

    Args:
        content_html: Markup placed verbatim inside <body>
        additional_css: Optional extra CSS from the caller
        lang: Value of the <html lang> attribute
        title: Document title

    Returns:
        Complete HTML document string
    """
    return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
{BASE_CSS}
{PRINT_CSS}
{additional_css or ""}
  </style>
</head>
<body>
{content_html}
</body>
</html>
"""
