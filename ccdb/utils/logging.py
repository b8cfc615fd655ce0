"""Centralized logging configuration using Loguru.

Every ccdb module logs through the single configured loguru logger exported
here. Library code is quiet by default: only warnings (ambiguous lookups and
similar diagnostics) reach stderr unless the level is raised.

Usage:
    from ccdb.utils.logging import logger
    logger.debug("Loaded {count} records", count=len(records))

Environment Variables:
    CCDB_LOG_LEVEL: TRACE|DEBUG|INFO|WARNING|ERROR (default: WARNING)
    CCDB_LOG_JSON: 0|1 (default: 0, human-readable)
    CCDB_LOG_FILE: path to an NDJSON log file (optional)
"""

import json
import os
import sys
from pathlib import Path

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("CCDB_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("CCDB_LOG_JSON", "0") == "1"
_log_file = os.environ.get("CCDB_LOG_FILE")


def _to_ndjson(message) -> str:
    """Serialize a loguru message into one NDJSON line."""
    record = message.record

    payload = {
        "level": record["level"].name,
        "time": record["time"].isoformat(),
        "msg": record["message"],
        "module": record["name"],
        "pid": record["process"].id,
    }

    # Extra context fields (bound or passed as format kwargs)
    for key, value in record["extra"].items():
        payload[key] = value if isinstance(value, (str, int, float, bool, type(None))) else str(value)

    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(payload)


def ndjson_sink(message) -> None:
    """Write log records as NDJSON to stderr.

    stdout is reserved for command output (``ccdb dump`` pipes JSON there).
    """
    # Never call logger.* inside a sink - causes infinite recursion
    sys.stderr.write(_to_ndjson(message) + "\n")
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

if _json_mode:
    logger.add(
        ndjson_sink,
        level=_log_level,
        colorize=False,
    )
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:
    def _file_ndjson_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_ndjson(message) + "\n")

    logger.add(
        _file_ndjson_sink,
        level="DEBUG",  # File always captures everything
    )


def configure_file_logging(log_dir: Path, level: str = "DEBUG") -> int:
    """Add rotating file handler for persistent logs.

    Args:
        log_dir: Directory for log files (e.g., Path(".ccdb"))
        level: Minimum log level for file output

    Returns:
        The loguru handler id, so callers can remove the sink again.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "ccdb.log"

    return logger.add(
        log_file,
        rotation="10 MB",
        retention="7 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )