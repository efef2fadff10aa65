from .loader import (
    BACKGROUND_SLOTS,
    LANGUAGE_SLOTS,
    Background,
    Language,
    ThemeConfig,
    load_config_from_json,
    parse_config,
)

__all__ = [
    "BACKGROUND_SLOTS",
    "LANGUAGE_SLOTS",
    "Background",
    "Language",
    "ThemeConfig",
    "load_config_from_json",
    "parse_config",
]
