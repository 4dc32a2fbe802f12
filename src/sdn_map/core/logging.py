"""Loguru sinks for the sdn-map service and CLI.

Boundary loading and GISTDA provider failures are reported through loguru.
Every record goes to stderr as a text line. Records bound with
``logger.bind(json_output=True)`` are also emitted as JSON for log shippers.
When ``LOG_DIR`` is set, ``sdn-map.log`` in that directory receives the
text stream too.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
_LOG_FILE_NAME = "sdn-map.log"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace the default Loguru sink with the sdn-map sinks.

    Called once by the API lifespan and once by the CLI root callback.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files.  When set, a rotating
            file sink is added (rotated every 24 hours, retained 7 days).
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, serialize=False)
    logger.add(
        sys.stderr,
        level=level,
        serialize=True,
        filter=lambda record: record["extra"].get("json_output", False),
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / _LOG_FILE_NAME,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
