import os

from .display import DisplayStyle, parse_display_style

# Basic settings helper to read environment configuration.


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self) -> None:
        self.DISPLAY_STYLE: DisplayStyle = parse_display_style(
            os.getenv("CATALOG_DISPLAY_STYLE", "standard")
        )
        self.SEED_SAMPLE: bool = _as_bool(os.getenv("CATALOG_SEED_SAMPLE"), False)
        self.LOG_LEVEL: str = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()
