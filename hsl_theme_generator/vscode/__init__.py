from .theme import build_theme, generate_theme_json

__all__ = ["build_theme", "generate_theme_json"]
