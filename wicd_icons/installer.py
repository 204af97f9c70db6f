from __future__ import annotations

import logging
import os
from functools import cached_property
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .lib.assets import force_symlink, install_if_present, remove_force
from .lib.env import PATHS
from .lib.manifests import Manifest, load_manifest
from .pipeline import PipelineResult, run_pipeline
from .steps import CleanStep, InstallStatusesStep, InstallThemeStep, PrepareStep

logger = logging.getLogger(__name__)

DEFAULT_FLAVOUR = PATHS.default_flavour

Size = Union[int, str]

STATUS_SIZES: Sequence[Size] = (16, 22, 24, 32, 36, 48, "original")
SMALL_SIZES = frozenset({"16x16", "22x22"})
HICOLOR_PATTERNS = ("*/*.png", "*/*.svg")


class InvalidFlavourError(ValueError):
    pass


def available_flavours(source_root: str | Path = PATHS.source_root) -> List[str]:
    d = Path(source_root) / "flavours"
    if not d.is_dir():
        return []
    return sorted(p.name for p in d.iterdir() if p.is_dir())


def flavour_exists(flavour: str, source_root: str | Path = PATHS.source_root) -> bool:
    return bool(flavour) and (Path(source_root) / "flavours" / flavour).is_dir()


def normalize_size(size: Size) -> str:
    """16 / "16" -> "16x16"; anything else is passed through as a string."""
    s = str(size)
    if len(s) == 2 and s.isdigit():
        return f"{s}x{s}"
    return s


def build_steps():
    return [
        PrepareStep(),
        InstallStatusesStep(),
        CleanStep(),
        InstallThemeStep(),
    ]


class Installer:
    """Install one flavour of the wicd icons into the configured roots.

    The full run is prepare -> install_statuses -> clean -> hicolor/launcher.
    Every phase is also callable on its own.
    """

    def __init__(
        self,
        flavour: Optional[str] = None,
        *,
        source_root: str | Path = PATHS.source_root,
        manifest_path: str | Path = PATHS.manifest,
        dry_run: bool = False,
    ) -> None:
        flavour = flavour or DEFAULT_FLAVOUR
        self.source_root = Path(source_root)
        if not flavour_exists(flavour, self.source_root):
            known = ", ".join(available_flavours(self.source_root)) or "none"
            raise InvalidFlavourError(f"Invalid flavour {flavour!r} (available: {known})")

        self.flavour = flavour
        self.manifest_path = Path(manifest_path)
        self.dry_run = dry_run

    def __repr__(self) -> str:
        return f"Installer(flavour={self.flavour!r}, source_root={str(self.source_root)!r})"

    @cached_property
    def manifest(self) -> Manifest:
        logger.debug("Loading manifest %s", str(self.manifest_path))
        return load_manifest(self.manifest_path)

    @property
    def flavour_dir(self) -> Path:
        return self.source_root / "flavours" / self.flavour

    @property
    def apps_dir(self) -> Path:
        return self.source_root / "apps"

    @property
    def desktop_entry(self) -> Path:
        return self.source_root / PATHS.desktop_entry

    def get_status_paths(self, size: Size, fmt: str = "png") -> Dict[Path, Path]:
        """Map each status icon target to its flavour source for one size.

        Targets repeated across roots collapse to the last one seen.
        """

        size = normalize_size(size)
        kind = "small" if size in SMALL_SIZES else "big"
        statuses = self.manifest.statuses(kind)
        flavour_dir = Path(os.path.realpath(self.flavour_dir))

        paths: Dict[Path, Path] = {}
        for root in self.manifest.paths("wicd_icons"):
            for canonical, alias in statuses.items():
                target = Path(root) / size / "status" / f"{canonical}.{fmt}"
                paths[target] = flavour_dir / f"{alias or canonical}.{fmt}"
        return paths

    def install_statuses(self) -> int:
        installed = 0
        for size in STATUS_SIZES:
            count = 0
            for target, source in self.get_status_paths(size).items():
                if install_if_present(source, target, dry_run=self.dry_run):
                    count += 1
            logger.info("Status icons %s: %d installed", normalize_size(size), count)
            installed += count
        return installed

    def install_launcher(self) -> int:
        installed = 0
        for root in self.manifest.paths("applications"):
            target = Path(root) / self.desktop_entry.name
            if install_if_present(self.desktop_entry, target, dry_run=self.dry_run):
                installed += 1
        logger.info("Launchers: %d installed", installed)
        return installed

    def _hicolor_icons(self) -> List[Path]:
        icons: List[Path] = []
        for pattern in HICOLOR_PATTERNS:
            icons += [p for p in self.apps_dir.glob(pattern) if p.is_file()]
        return sorted(icons)

    def install_hicolor(self) -> bool:
        roots = self.manifest.paths("icons_hicolor")
        installed = False
        for icon in self._hicolor_icons():
            source = icon.resolve()
            category = icon.parent.name
            for root in roots:
                target = Path(root) / category / "apps" / icon.name
                if install_if_present(source, target, dry_run=self.dry_run):
                    installed = True

        if installed:
            # The hicolor icons supersede the old pixmap.
            for root in self.manifest.paths("pixmaps"):
                remove_force(Path(root) / PATHS.legacy_pixmap, dry_run=self.dry_run)
        else:
            logger.info("No hicolor icons installed; keeping %s", PATHS.legacy_pixmap)
        return installed

    def prepare(self) -> None:
        for canonical, aliases in self.manifest.preparables.items():
            for alias in aliases:
                force_symlink(f"{canonical}.png", self.flavour_dir / f"{alias}.png", dry_run=self.dry_run)

    def clean(self) -> None:
        for aliases in self.manifest.preparables.values():
            for alias in aliases:
                remove_force(self.flavour_dir / f"{alias}.png", dry_run=self.dry_run)

    def install(self, *, start_at: Optional[str] = None, stop_after: Optional[str] = None) -> PipelineResult:
        logger.info("Installing flavour %s from %s", self.flavour, str(self.source_root))
        return run_pipeline(
            installer=self,
            steps=build_steps(),
            start_at=start_at,
            stop_after=stop_after,
        )
