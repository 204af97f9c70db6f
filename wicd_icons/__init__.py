"""wicd icon installer (manifest-driven, flavour-aware).

Core design goals:
- Only overwrite icons the deployed theme already ships (placeholders)
- One manifest describes every target root and icon name
- Phases run in strict order and can be run on their own
- Centralized logging
"""

__all__ = []
