# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.path import user_data_dir
from infra.operational_support import TraceIdLogFilter, install_global_exception_hooks

LOG_FILE_NAME = "quote_planner.log"


def setup_logging(log_dir: Path | None = None, level: int = logging.INFO) -> Path:
    """
    Configure application logging.
    Logs go to the per-user data directory unless log_dir is given.
    Returns the log file path.
    """
    log_dir = Path(log_dir) if log_dir is not None else user_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(level)

    # Re-running setup must not stack handlers
    root.handlers.clear()

    trace_filter = TraceIdLogFilter()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # 1 MB per file
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.addFilter(trace_filter)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s")
    )
    root.addHandler(file_handler)

    console = logging.StreamHandler()
    console.addFilter(trace_filter)
    console.setFormatter(logging.Formatter("%(levelname)s [trace=%(trace_id)s]: %(message)s"))
    root.addHandler(console)

    install_global_exception_hooks()
    root.info("Logging initialized. Log file at %s", log_file)
    return log_file


__all__ = ["LOG_FILE_NAME", "setup_logging"]
