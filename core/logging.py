import logging
import sys

from core.config import settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure logging for the whole app.
    Call this once at the top of the Streamlit page (reruns are harmless,
    basicConfig is a no-op once handlers exist).
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # httpx logs every request at INFO; keystroke-driven searches make that noisy
    logging.getLogger("httpx").setLevel(logging.WARNING)


logger = logging.getLogger("rental_intake")
