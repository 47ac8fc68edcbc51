import logging
import sys

from telemedicine.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=(level or settings.log_level).upper(),
    )
    # SQL echo is controlled by the engine's own flag
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
