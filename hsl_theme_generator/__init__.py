from .color import HSL, hsl_to_hex, hsl_to_rgb, validate_hsl
from .config import ThemeConfig, load_config_from_json, parse_config
from .errors import (
    ColorRangeError,
    ConfigError,
    InvalidFieldError,
    MissingFieldError,
    ThemeError,
)
from .export import export_theme
from .vscode import build_theme, generate_theme_json

__version__ = "0.1.0"

__all__ = [
    "HSL",
    "ColorRangeError",
    "ConfigError",
    "InvalidFieldError",
    "MissingFieldError",
    "ThemeConfig",
    "ThemeError",
    "build_theme",
    "export_theme",
    "generate_theme_json",
    "hsl_to_hex",
    "hsl_to_rgb",
    "load_config_from_json",
    "parse_config",
    "validate_hsl",
]
