"""Logging setup shared by all schema_ts modules.

Modules obtain a logger with ``get_logger(__name__)``. Nothing is printed until
``configure_logging`` installs a handler, which the CLI does on startup.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "schema_ts"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``schema_ts`` hierarchy.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        The configured logger instance.
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING, use_rich: bool = True) -> None:
    """Install a handler on the package logger.

    Args:
        level: Logging level for the package logger.
        use_rich: Render records with ``rich`` instead of a plain stream handler.
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if _configured:
        for handler in root.handlers:
            handler.setLevel(level)
        return

    if use_rich:
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True, show_path=False, markup=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    handler.setLevel(level)
    root.addHandler(handler)
    root.propagate = False
    _configured = True
