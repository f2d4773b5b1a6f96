"""
Run the PDF generator: python -m pdf_generator
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    # uvicorn turns SIGINT/SIGTERM into the app's shutdown hook, which closes the browser
    uvicorn.run(
        "pdf_generator.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
