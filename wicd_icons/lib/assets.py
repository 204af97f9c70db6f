from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def install_if_present(src: str | Path, dst: str | Path, *, dry_run: bool = False) -> bool:
    """Copy src over dst, but only when dst already exists as a regular file.

    Packaging pre-seeds the targets, so only icons already known to the
    deployed theme get overwritten. Returns whether a copy happened.
    Raises FileNotFoundError, leaving dst untouched, when src is missing.
    """

    s = Path(src)
    d = Path(dst)
    if not d.is_file():
        logger.debug("Skipping %s (no placeholder)", str(d))
        return False

    if dry_run:
        if s.exists():
            logger.info("Would install %s -> %s", str(s), str(d))
        else:
            # prepare() creates no aliases in a dry run
            logger.debug("Would install %s -> %s (source assumed to be an alias)", str(s), str(d))
        return True

    # Keep the placeholder when there is nothing to copy.
    if not s.exists():
        raise FileNotFoundError(str(s))

    d.unlink()
    shutil.copy2(s, d)
    logger.debug("Installed %s -> %s", str(s), str(d))
    return True


def force_symlink(target: str, link: str | Path, *, dry_run: bool = False) -> None:
    """Point link at target, replacing whatever currently has that name."""

    p = Path(link)
    if dry_run:
        logger.info("Would link %s -> %s", str(p), target)
        return

    if p.is_symlink() or p.exists():
        p.unlink()
    p.symlink_to(target)
    logger.debug("Linked %s -> %s", str(p), target)


def remove_force(path: str | Path, *, dry_run: bool = False) -> None:
    """Remove a file; a missing file is not an error."""

    p = Path(path)
    if dry_run:
        logger.info("Would remove %s", str(p))
        return

    p.unlink(missing_ok=True)
    logger.debug("Removed %s", str(p))
