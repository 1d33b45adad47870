"""Standard-library logging for uvicorn and third-party libraries.

Application events go through logfire directly; this module routes what
uvicorn, SQLAlchemy and asyncpg emit through `logging` into the same place.
"""

import logging
import sys

import logfire

from qna.config import Settings


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access lines for load balancer health checks."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "GET /health" not in record.getMessage()


def setup_logging(settings: Settings) -> None:
    """Configure root logging and forward records to logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,
    )

    # SQL is traced by the SQLAlchemy instrumentation; frames are too chatty
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("websockets").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())

    logging.getLogger("qna").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
