from .json_export import export_theme

__all__ = ["export_theme"]
