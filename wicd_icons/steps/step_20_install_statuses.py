from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..installer import Installer


class InstallStatusesStep:
    step_id = "20_install_statuses"

    def run(self, installer: "Installer") -> None:
        installer.install_statuses()
