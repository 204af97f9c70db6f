from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..installer import Installer


class CleanStep:
    step_id = "30_clean"

    def run(self, installer: "Installer") -> None:
        # Aliases are only needed while status sources are being read.
        installer.clean()
