import atexit
import logging

from dotenv import find_dotenv, load_dotenv
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


def init_env():
    """Load a `.env` from the working directory, without overriding the environment."""
    if load_dotenv(find_dotenv(usecwd=True)):
        logger.debug("Loaded environment from .env")


def init_logging(verbose):
    handler = RichHandler()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,  # Override any previous logging configuration
    )

    # werkzeug logs every request at INFO
    if not verbose:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)

    def cleanup_logging():
        logging.getLogger().removeHandler(handler)
        logging.shutdown()

    atexit.register(cleanup_logging)
