from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# wicd_icons/lib/env.py -> wicd_icons/data (shipped as package data)
DATA_ROOT = Path(__file__).resolve().parents[1] / "data"


@dataclass(frozen=True)
class Paths:
    source_root: Path = DATA_ROOT / "src"
    manifest: Path = DATA_ROOT / "manifests" / "icons.yaml"
    default_flavour: str = "ubuntu-mono-dark"
    desktop_entry: str = "wicd.desktop"
    legacy_pixmap: str = "wicd-gtk.xpm"


PATHS = Paths()
