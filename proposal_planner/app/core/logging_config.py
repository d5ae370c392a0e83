"""
Root logger setup for the front-end and the proposal store.

Store and route modules only ever call ``logging.getLogger(__name__)``;
``create_app`` calls :func:`setup_logging` once so that their records
(request failures in particular) end up on the console and, when
``LOG_FILE`` is set, in a file as well.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach handlers to the root logger unless something already did.

    Parameters
    ----------
    level : str
        Name of the root level, any case.  Names ``logging`` does not
        know resolve to ``INFO``.
    logfile : Optional[str]
        Extra destination for the same records.
    """
    root = logging.getLogger()
    if root.handlers:
        # Test runners and uvicorn install their own handlers first.
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
