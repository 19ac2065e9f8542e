"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the document Q&A page.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles API routes, NiceGUI handles the UI.
    """
    import uvicorn
    from nicegui import ui

    from docqa.api.app import create_app
    from docqa.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    port = int(os.getenv("PORT", "8000"))

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Document Q&A Assistant",
        favicon="📄",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "docqa-secret"),
    )

    logger.info(f"Starting server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
