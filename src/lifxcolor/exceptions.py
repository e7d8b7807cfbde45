"""Errors raised by lifxcolor.

Every error carries a one-line `message` for the user and an optional
`hint` on how to fix the input; `lifxcolor.cli.output.fail` prints both.

```
LifxColorError
├── ColorValueError     a color component is NaN, infinite or not a number
├── UnknownColorError   no preset with that name
└── ConfigError         the settings file is unreadable or holds bad values
```

Color constructors do not range-check. Pydantic rejects non-finite
components, and `wrap_color_error` turns its `ValidationError` into a
`ColorValueError`.
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import ValidationError

_COMPONENT_HINTS = {
    "hue": "Hue is given in degrees (0-360)",
    "saturation": "Saturation is a fraction between 0 and 1",
    "brightness": "Brightness is a fraction between 0 and 1",
    "kelvin": "Kelvin must be a whole number, typically 2500-10000",
}


class LifxColorError(Exception):
    """Base class for every lifxcolor error."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class ColorValueError(LifxColorError):
    """A color component was rejected."""

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for '{field}': {reason}",
            hint=_COMPONENT_HINTS.get(field),
        )
        self.field = field
        self.value = value


class UnknownColorError(LifxColorError):
    """No color preset has the requested name."""

    def __init__(self, name: str, known: Iterable[str]):
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown color '{name}'",
            hint=f"Available colors: {', '.join(self.known)}",
        )


class ConfigError(LifxColorError):
    """The settings file could not be parsed or failed validation.

    `field` names the first offending setting, or is None when the file
    is not valid JSON at all.
    """

    def __init__(self, path: Path, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            hint=f"Config file: {path}\nRun 'lifxcolor config reset' to restore defaults",
        )
        self.path = path
        self.field = field


def _location(err: dict) -> str:
    return ".".join(str(part) for part in err["loc"]) or "value"


def wrap_color_error(error: ValidationError) -> ColorValueError:
    """Report the first component a Color constructor rejected."""
    first = error.errors()[0]
    return ColorValueError(_location(first), first.get("input"), first["msg"])


def wrap_config_error(error: ValidationError, path: Path) -> ConfigError:
    """Describe why AppConfig validation failed for the file at `path`."""
    errors = error.errors()
    if errors[0]["type"] == "json_invalid":
        return ConfigError(path, f"Configuration file {path} is not valid JSON: {errors[0]['msg']}")

    problems = "; ".join(f"'{_location(e)}': {e['msg']}" for e in errors)
    return ConfigError(
        path,
        f"Invalid configuration value for {problems}",
        field=_location(errors[0]),
    )
