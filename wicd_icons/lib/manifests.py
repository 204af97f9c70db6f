from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional


class ManifestKeyError(KeyError):
    """A required manifest section is missing."""


@dataclass(frozen=True)
class Manifest:
    """Path mappings, status names and aliases driving the icon install."""

    raw: Dict[str, Any]
    source: Optional[Path] = None

    def _require(self, mapping: Dict[str, Any], key: str, where: str) -> Any:
        if not isinstance(mapping, dict) or key not in mapping:
            raise ManifestKeyError(f"{where} missing from manifest {self.source or '<memory>'}")
        return mapping[key]

    def paths(self, name: str) -> List[str]:
        """Configured roots for a logical location; unconfigured means none."""
        section = self._require(self.raw, "paths", "paths") or {}
        return [str(p) for p in (section.get(name) or [])]

    def statuses(self, kind: str) -> Dict[str, Optional[str]]:
        section = self._require(self.raw, "statuses", "statuses")
        return dict(self._require(section, kind, f"statuses.{kind}") or {})

    @property
    def preparables(self) -> Dict[str, List[str]]:
        section = self._require(self.raw, "preparables", "preparables") or {}
        return {str(k): [str(a) for a in (v or [])] for k, v in section.items()}


def load_manifest(path: str | Path) -> Manifest:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))

    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML required to load manifests") from e

    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a mapping/dict: {p}")
    return Manifest(raw=data, source=p)
