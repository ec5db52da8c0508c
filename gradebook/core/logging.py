# gradebook/core/logging.py
import logging
import sys

from gradebook.core.config import settings


# Configure standard Python logging
def setup_logging():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)  # Print logs to console
        ]
    )
    return logging.getLogger("gradebook")


logger = setup_logging()
