import json
from collections.abc import Mapping

from ..color import hsl_to_hex
from ..config import ThemeConfig, parse_config
from ..errors import MissingFieldError
from .styles import build_colors, build_token_colors


def _slot(config, path):
    section, _, name = path.partition(".")
    value = getattr(getattr(config, section, None), name, None)
    if value is None:
        raise MissingFieldError(path)
    return value


def build_theme(config, logger=None):
    """Build a VS Code color theme document.

    Args:
        config: ThemeConfig, or a raw mapping which is validated first
        logger: Optional logger passed to the color converter for tracing

    Returns:
        dict with ``type``, ``name``, ``colors`` and ``tokenColors``

    Raises:
        MissingFieldError: A slot referenced by the document is absent
    """
    if not isinstance(config, ThemeConfig):
        if not isinstance(config, Mapping):
            raise TypeError(f"Expected ThemeConfig or mapping, got {type(config).__name__}")
        config = parse_config(config)

    # Every slot is converted once, even when several surfaces share it
    cache = {}

    def resolve(path):
        if path not in cache:
            cache[path] = hsl_to_hex(_slot(config, path), logger=logger)
        return cache[path]

    for path, value in (("themeType", config.theme_type), ("themeName", config.theme_name)):
        if value is None:
            raise MissingFieldError(path)

    return {
        "type": hsl_to_hex(config.theme_type, logger=logger),
        "name": hsl_to_hex(config.theme_name, logger=logger),
        "colors": build_colors(resolve),
        "tokenColors": build_token_colors(resolve),
    }


def generate_theme_json(config, logger=None):
    """Generate the theme document as indented JSON text.

    Returns:
        JSON string of the theme data
    """
    return json.dumps(build_theme(config, logger=logger), indent=2)
