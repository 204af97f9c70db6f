from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..installer import Installer

logger = logging.getLogger(__name__)


class InstallThemeStep:
    step_id = "40_install_theme"

    def run(self, installer: "Installer") -> None:
        hicolor = installer.install_hicolor()
        launchers = installer.install_launcher()
        logger.info(
            "Theme installed (hicolor_changed=%s launchers=%d)",
            hicolor,
            launchers,
        )
