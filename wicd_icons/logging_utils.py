from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_path: Optional[str] = None, *, verbose: bool = False) -> None:
    """Log to the console, and also to log_path when one is given.

    verbose switches to DEBUG, which reports every copy, link and removal.
    Calling this again only changes the level.
    """

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if getattr(root, "_wicd_icons_configured", False):
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_path:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)
    setattr(root, "_wicd_icons_configured", True)
