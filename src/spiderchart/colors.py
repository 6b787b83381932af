"""32-bit ARGB color helpers."""

BLACK = 0xFF000000
DKGRAY = 0xFF444444
GRAY = 0xFF888888
LTGRAY = 0xFFCCCCCC
WHITE = 0xFFFFFFFF
TRANSPARENT = 0x00000000


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack 8-bit components into a 0xAARRGGBB integer.

    Raises:
        ValueError: If any component is outside 0..255.
    """
    for name, component in (("alpha", alpha), ("red", red), ("green", green), ("blue", blue)):
        if not 0 <= component <= 255:
            raise ValueError(f"{name} component must be in 0..255, got {component}")
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def rgb(red: int, green: int, blue: int) -> int:
    """Opaque color from RGB components."""
    return argb(255, red, green, blue)


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def to_hex(color: int) -> str:
    """Return '#RRGGBB' (alpha dropped)."""
    return f"#{red(color):02x}{green(color):02x}{blue(color):02x}"


def opacity(color: int) -> float:
    """Alpha channel as a float in [0, 1]."""
    return round(alpha(color) / 255, 4)


def to_css(color: int) -> str:
    """Return a CSS 'rgba(r,g,b,a)' string."""
    return f"rgba({red(color)},{green(color)},{blue(color)},{opacity(color)})"


def to_rgba_floats(color: int) -> tuple[float, float, float, float]:
    """Return (r, g, b, a) floats in [0, 1], as matplotlib expects."""
    return (red(color) / 255, green(color) / 255, blue(color) / 255, alpha(color) / 255)


def parse_color(value: int | str) -> int:
    """Parse a color from an integer or a '#RRGGBB' / '#AARRGGBB' string.

    Six-digit strings are treated as fully opaque.

    Raises:
        ValueError: If the value cannot be interpreted as a color.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Color out of 32-bit range: {value:#x}")
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#"):
            text = text[1:]
        elif text.lower().startswith("0x"):
            text = text[2:]
        try:
            number = int(text, 16)
        except ValueError as err:
            raise ValueError(f"Invalid color: {value!r}") from err
        if len(text) == 6:
            return 0xFF000000 | number
        if len(text) == 8:
            return number
    raise ValueError(f"Invalid color: {value!r}")
