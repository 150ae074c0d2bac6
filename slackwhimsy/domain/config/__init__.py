from .settings import (
    Settings,
    load_settings,
    get_settings
)

__all__ = [
    "Settings",
    "load_settings",
    "get_settings"
]
