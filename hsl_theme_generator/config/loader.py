import json
import math
from collections import namedtuple
from collections.abc import Mapping

from ..color import HSL, validate_hsl
from ..errors import InvalidFieldError, MissingFieldError

BACKGROUND_SLOTS = ["primary", "secondary"]
LANGUAGE_SLOTS = [
    "type",
    "operator",
    "value",
    "function",
    "parameter",
    "comment",
    "constant",
    "entity",
    "invalid",
    "keyword",
    "storage",
    "string",
    "support",
    "variable",
]

Background = namedtuple("Background", BACKGROUND_SLOTS)
Language = namedtuple("Language", LANGUAGE_SLOTS)
ThemeConfig = namedtuple(
    "ThemeConfig", ["theme_type", "theme_name", "background", "language"]
)


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _reject_constant(name):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_hsl(data, key, path, strict):
    value = data.get(key)
    if value is None:
        raise MissingFieldError(path)
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InvalidFieldError(path, "expected an [h, s, l] array")
    if not all(_is_number(v) for v in value):
        raise InvalidFieldError(path, "h, s and l must be finite numbers")
    if strict:
        return validate_hsl(value, path)
    return HSL(*value)


def _parse_section(data, section, slots, strict):
    value = data.get(section)
    if value is None:
        raise MissingFieldError(section)
    if not isinstance(value, Mapping):
        raise InvalidFieldError(section, "expected an object")
    return [
        _parse_hsl(value, slot, f"{section}.{slot}", strict) for slot in slots
    ]


def parse_config(data, strict=False):
    """Validate decoded JSON into a ThemeConfig.

    Args:
        data: Mapping as read from the config file
        strict: Also reject HSL components outside their nominal ranges

    Returns:
        ThemeConfig with every slot present

    Raises:
        MissingFieldError: A required slot is absent
        InvalidFieldError: A slot is not an [h, s, l] array of numbers
        ColorRangeError: strict is set and a component is out of range
    """
    if not isinstance(data, Mapping):
        raise InvalidFieldError("", "expected a JSON object at the top level")

    return ThemeConfig(
        theme_type=_parse_hsl(data, "themeType", "themeType", strict),
        theme_name=_parse_hsl(data, "themeName", "themeName", strict),
        background=Background(
            *_parse_section(data, "background", BACKGROUND_SLOTS, strict)
        ),
        language=Language(*_parse_section(data, "language", LANGUAGE_SLOTS, strict)),
    )


def load_config_from_json(json_path, strict=False):
    """Load a ThemeConfig from a JSON file.

    Args:
        json_path: Path to the config JSON file
        strict: Reject out-of-range HSL components

    Returns:
        ThemeConfig
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f, parse_constant=_reject_constant)

    return parse_config(data, strict=strict)
