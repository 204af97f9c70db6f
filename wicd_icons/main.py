from __future__ import annotations

import argparse
import logging
from typing import Optional

from .installer import DEFAULT_FLAVOUR, Installer, available_flavours, build_steps
from .lib.env import PATHS
from .logging_utils import configure_logging
from .pipeline import PipelineResult

logger = logging.getLogger(__name__)


def run(
    flavour: Optional[str] = None,
    *,
    source_root: str = str(PATHS.source_root),
    manifest_path: str = str(PATHS.manifest),
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """Install the icons for one flavour."""

    try:
        installer = Installer(
            flavour,
            source_root=source_root,
            manifest_path=manifest_path,
            dry_run=dry_run,
        )
        result = installer.install(start_at=start_at, stop_after=stop_after)
    except Exception:
        logger.exception("Icon installation failed")
        raise

    logger.info("Done (ran_steps=%s dry_run=%s)", ",".join(result.ran_steps), dry_run)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    step_ids = [s.step_id for s in build_steps()]

    p = argparse.ArgumentParser(prog="wicd-icons", description="Install wicd icons for a flavour")
    p.add_argument("flavour", nargs="?", default=DEFAULT_FLAVOUR, help=f"Icon flavour (default: {DEFAULT_FLAVOUR})")
    p.add_argument("--source-root", default=str(PATHS.source_root), help="Directory holding flavours/, apps/ and wicd.desktop")
    p.add_argument("--manifest", default=str(PATHS.manifest), help="Path to the icon manifest (yaml)")
    p.add_argument("--log", default=None, help="Also log to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every file operation")
    p.add_argument("--dry-run", action="store_true", help="Log what would change without touching the filesystem")
    p.add_argument("--start-at", default=None, choices=step_ids, help="Start at step_id")
    p.add_argument("--stop-after", default=None, choices=step_ids, help="Stop after step_id")
    p.add_argument("--list-flavours", action="store_true", help="List available flavours and exit")

    args = p.parse_args(argv)

    if args.list_flavours:
        for name in available_flavours(args.source_root):
            print(name)
        return 0

    configure_logging(log_path=args.log, verbose=args.verbose)

    run(
        args.flavour,
        source_root=args.source_root,
        manifest_path=args.manifest,
        start_at=args.start_at,
        stop_after=args.stop_after,
        dry_run=args.dry_run,
    )
    return 0
