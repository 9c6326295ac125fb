"""Server launcher for the Arix chat page.

Loads .env, configures logging, checks the Gemini settings and then serves
the NiceGUI page and the FastAPI routes from one uvicorn process.
"""

import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def check_completion_config() -> bool:
    """Validate the Gemini settings once, before any page is served.

    Returns:
        True if a usable configuration could be built from the environment.
    """
    from arix.client.config import get_gemini_config

    try:
        config = get_gemini_config()
    except ValidationError as e:
        logger.error(f"Invalid Gemini configuration: {e.errors()[0]['msg']}")
        return False

    logger.info(f"Using model {config.model_name}")
    return True


def run() -> None:
    """Serve the chat page and the API on HOST:PORT.

    Raises:
        SystemExit: If the Gemini configuration is invalid.
    """
    if not check_completion_config():
        raise SystemExit(1)

    import uvicorn
    from nicegui import ui

    from arix.api.app import create_app
    from arix.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="Arix",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "arix-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def main() -> None:
    logger.info("Starting Arix chat server")
    run()


if __name__ == "__main__":
    main()
