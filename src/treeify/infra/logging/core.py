from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Handlers run
behind a QueueListener so that log file writes happen off the thread that
walks the directory tree. If the pipeline cannot be built, a plain stderr
handler is installed instead so diagnostics are never lost.
"""

import atexit
import logging
import os
import queue
import sys
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from treeify.infra.fs import get_user_data_dir
from treeify.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_treeify_configured"
_QUEUE_LISTENER_ATTR: str = "_treeify_queue_listener"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
EMERGENCY_FORMAT = "LOGGING FALLBACK | %(levelname)s | %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one CLI run.

    Attributes:
        level: Level name; unknown names fall back to INFO.
        console: Echo records on stderr.
        log_file: Rotating log file, or None for console only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "treeify.log") -> str:
    """Resolve the standard log file path within the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, routing records through a queue.

    Repeated calls are no-ops unless 'force' is set, in which case our
    previous handlers and listener are torn down first. Handlers installed
    by other code are left alone. Any failure while building the handlers
    switches to an emergency stderr handler.

    Args:
        cfg: Settings for the logging system.
        force: If True, re-initialize handlers.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    try:
        _install_queue_pipeline(root, cfg)
    except Exception as e:
        _install_emergency_handler(root, e)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def shutdown_logging() -> None:
    """Stop the listener and detach our handlers, flushing queued records."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually called with __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _install_queue_pipeline(root: logging.Logger, cfg: LoggingConfig) -> None:
    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(FILE_FORMAT),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()
    setattr(root, _QUEUE_LISTENER_ATTR, listener)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)
    root.addHandler(queue_handler)

    # Flush pending records on shutdown
    atexit.register(_safe_stop_listener, listener)


def _install_emergency_handler(root: logging.Logger, cause: Exception) -> None:
    """Attach a direct stderr handler after the queue pipeline failed."""
    _remove_our_handlers(root)
    _stop_existing_listener(root)
    root.setLevel(logging.INFO)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(EMERGENCY_FORMAT))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning(f"Logging setup failed ({cause}). Switched to emergency console.")


def _parse_level(level: str) -> int:
    """Convert a level name to its numeric value, defaulting to INFO."""
    value = logging.getLevelName(str(level or "").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating listeners that were already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
