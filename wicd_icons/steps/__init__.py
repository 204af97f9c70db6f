from .step_10_prepare import PrepareStep
from .step_20_install_statuses import InstallStatusesStep
from .step_30_clean import CleanStep
from .step_40_install_theme import InstallThemeStep

__all__ = [
    "PrepareStep",
    "InstallStatusesStep",
    "CleanStep",
    "InstallThemeStep",
]
