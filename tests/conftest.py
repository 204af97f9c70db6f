"""Shared fixtures: a throwaway source tree, manifest and target roots."""

from dataclasses import dataclass
from pathlib import Path

import pytest
import yaml


@dataclass
class IconTree:
    base: Path

    @property
    def source_root(self) -> Path:
        return self.base / "src"

    @property
    def manifest_path(self) -> Path:
        return self.base / "icons.yaml"

    def root(self, name: str) -> Path:
        return self.base / "target" / name

    def manifest(self) -> dict:
        return {
            "paths": {
                "applications": [str(self.root("applications"))],
                "icons_hicolor": [str(self.root("hicolor"))],
                "pixmaps": [str(self.root("pixmaps"))],
                "wicd_icons": [str(self.root("wicd"))],
            },
            "statuses": {
                "small": {"connected": None, "offline": "disconnected", "online": None},
                "big": {"connected": None, "signal": "connected-big"},
            },
            "preparables": {"connected": ["online"]},
        }

    def write_manifest(self, data: dict) -> Path:
        self.manifest_path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return self.manifest_path

    def seed(self, path: Path, content: bytes = b"placeholder") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path


@pytest.fixture
def icon_tree(tmp_path):
    tree = IconTree(tmp_path)
    flavour = tree.source_root / "flavours" / "mono"
    flavour.mkdir(parents=True)
    (tree.source_root / "flavours" / "colour").mkdir()
    for name in ("connected", "disconnected", "connected-big"):
        (flavour / f"{name}.png").write_bytes(name.encode())

    apps = tree.source_root / "apps"
    tree.seed(apps / "16x16" / "wicd-gtk.png", b"app-16")
    tree.seed(apps / "scalable" / "wicd-gtk.svg", b"<svg/>")
    tree.seed(tree.source_root / "wicd.desktop", b"[Desktop Entry]\nName=Wicd\n")

    tree.write_manifest(tree.manifest())
    return tree
