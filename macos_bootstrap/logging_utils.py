from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = str(Path.home() / "Library" / "Logs" / "macos-bootstrap.log")
FALLBACK_LOG_NAME = "macos-bootstrap.log"

# Set on the handlers we install so a second call can find them.
_MARKER = "_macos_bootstrap_handler"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)


def _open_log_file(log_path: str) -> logging.FileHandler:
    """Open the requested log file, else one in the working directory."""

    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        logging.getLogger(__name__).debug("Cannot open %s (%s), using %s", log_path, e, fallback)
        return logging.FileHandler(fallback, encoding="utf-8")


def _our_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if getattr(h, _MARKER, False)]


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    *,
    verbose: bool = False,
    console: bool = True,
) -> str:
    """Send every record to the log file and a summary to the console.

    The file always receives DEBUG, so captured brew/pip/gem output ends up
    in the log. The console shows skip/install decisions at INFO, or the
    full DEBUG stream with ``verbose``.

    Safe to call more than once: later calls only adjust the console level.
    Returns the log file actually in use.
    """

    root = logging.getLogger()
    console_level = logging.DEBUG if verbose else logging.INFO

    existing = _our_handlers(root)
    if existing:
        chosen: Optional[str] = None
        for h in existing:
            if isinstance(h, logging.FileHandler):
                chosen = h.baseFilename
            else:
                h.setLevel(console_level)
        return chosen or log_path

    root.setLevel(logging.DEBUG)

    file_handler = _open_log_file(log_path)
    file_handler.setLevel(logging.DEBUG)
    handlers: list[logging.Handler] = [file_handler]

    if console:
        stream = logging.StreamHandler()
        stream.setLevel(console_level)
        handlers.append(stream)

    for h in handlers:
        h.setFormatter(_FORMAT)
        setattr(h, _MARKER, True)
        root.addHandler(h)

    chosen = file_handler.baseFilename
    logging.getLogger(__name__).info("Logging to %s", chosen)
    return chosen
