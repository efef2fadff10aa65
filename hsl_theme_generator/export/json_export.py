import json


def export_theme(theme, filepath):
    """Write a theme document as 2-space indented JSON.

    Args:
        theme: Fully built theme document
        filepath: Output file path, overwritten if it exists
    """
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(theme, f, indent=2)
