# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import logging
import os

from .app_factory import create_app
from .logging_config import setup_logging

# Configure logging at module load time
setup_logging()

logger = logging.getLogger(__name__)

app = create_app()


def run(host: str = None, port: int = None, reload: bool = False) -> None:
    """Serve the API with uvicorn (HOST / PORT env vars, default 0.0.0.0:8000)."""
    import uvicorn

    host = host or os.getenv("HOST", "0.0.0.0")
    port = port or int(os.getenv("PORT", "8000"))
    logger.info("Starting voice NLU API on %s:%d", host, port)
    uvicorn.run("voice_nlu.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    run()
