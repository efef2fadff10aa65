class ThemeError(Exception):
    """Base class for theme generation errors."""


class ConfigError(ThemeError):
    """A configuration slot could not be turned into a color.

    Attributes:
        path: Dotted location of the offending slot, e.g. ``language.comment``
    """

    def __init__(self, path, message=None):
        self.path = path
        super().__init__(message or f"Invalid configuration field: {path}")


class MissingFieldError(ConfigError):
    def __init__(self, path):
        super().__init__(path, f"Missing configuration field: {path}")


class InvalidFieldError(ConfigError):
    def __init__(self, path, reason):
        self.reason = reason
        super().__init__(path, f"Invalid configuration field {path}: {reason}")


class ColorRangeError(ConfigError):
    def __init__(self, path, component, value, bounds):
        self.component = component
        self.value = value
        super().__init__(
            path,
            f"{path or 'color'}: {component}={value} is outside {bounds}",
        )
