from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..installer import Installer


class PrepareStep:
    step_id = "10_prepare"

    def run(self, installer: "Installer") -> None:
        installer.prepare()
