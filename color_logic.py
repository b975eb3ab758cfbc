import math
import re
from enum import Enum
from typing import NamedTuple

HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
# Text that could still grow into #RRGGBB
PARTIAL_HEX_PATTERN = re.compile(r"\s*(#[0-9a-fA-F]{0,5})?")

MONOCHROME_LIGHTNESS = range(20, 81, 15)


class ColorError(ValueError):
    pass


class InvalidColorFormat(ColorError):
    def __init__(self, text):
        super().__init__(f"Invalid color '{text}', expected #RRGGBB")
        self.text = text


class UnknownScheme(ColorError):
    def __init__(self, scheme):
        super().__init__(f"Unknown harmony scheme: {scheme!r}")
        self.scheme = scheme


class RGBColor(NamedTuple):
    red: int
    green: int
    blue: int

    @property
    def hex(self):
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class HSLColor(NamedTuple):
    h: int
    s: int
    l: int

    def with_hue(self, hue):
        return HSLColor(round_half_up(hue) % 360, self.s, self.l)

    def rotated(self, degrees):
        return self.with_hue(self.h + degrees)


class HarmonyScheme(Enum):
    MONOCHROMATIC = "monochromatic"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"

    @property
    def label(self):
        return self.value.capitalize()

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownScheme(value) from None


def round_half_up(value):
    """Round halves towards +inf. The builtin round() sends ties to even."""
    return int(math.floor(value + 0.5))


# --- Conversions ---

def parse_hex(text):
    """
    Parse '#RRGGBB' (or the '#RGB' shorthand) into an RGBColor.
    Raises InvalidColorFormat for anything else.
    """
    if not isinstance(text, str):
        raise InvalidColorFormat(text)
    match = HEX_PATTERN.match(text.strip())
    if not match:
        raise InvalidColorFormat(text)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return RGBColor(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hsl(rgb):
    r, g, b = (c / 255.0 for c in rgb)
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2

    if mx == mn:
        # Achromatic
        h = s = 0.0
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(round_half_up(h * 360) % 360,
                    round_half_up(s * 100),
                    round_half_up(l * 100))


def hex_to_hsl(text):
    return rgb_to_hsl(parse_hex(text))


def hsl_to_rgb(h, s, l):
    """
    Convert HSL (degrees, percent, percent) to RGBColor (0-255).
    Hue is wrapped into [0, 360) before picking the sextant.
    """
    h = h % 360
    s = s / 100.0
    l = l / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0
    elif h < 120:
        r, g, b = x, c, 0
    elif h < 180:
        r, g, b = 0, c, x
    elif h < 240:
        r, g, b = 0, x, c
    elif h < 300:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    # Clamp values to 0-255 in case of float errors
    return RGBColor(*(max(0, min(255, round_half_up((v + m) * 255))) for v in (r, g, b)))


def hsl_to_hex(h, s, l):
    return hsl_to_rgb(h, s, l).hex


def is_partial_hex(text):
    """True while `text` is still an unfinished '#RRGGBB' (including '#RGB')."""
    return PARTIAL_HEX_PATTERN.fullmatch(text) is not None


def relative_luminance(rgb):
    """
    Relative luminance (0-1) using WCAG 2.0 channel linearization.
    """
    linear = []
    for c in rgb:
        v = c / 255.0
        linear.append(v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4)
    r, g, b = linear
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def rgb_to_rgb_string(rgb):
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"


def rgb_to_hsl_string(rgb):
    h, s, l = rgb_to_hsl(rgb)
    return f"hsl({h}, {s}%, {l}%)"


# --- Harmony schemes ---

def get_monochromatic(base):
    """
    Monochromatic (5 tones)
    Keep hue and saturation, step lightness 20..80.
    """
    return tuple(HSLColor(base.h, base.s, light) for light in MONOCHROME_LIGHTNESS)


def get_complementary(base):
    """
    Complementary (180° shift)
    Returns: [base, complementary]
    """
    return (base, base.rotated(180))


def get_analogous(base):
    """
    Analogous (±30° hue shift)
    Returns: [-30, base, +30]
    """
    return (base.rotated(330), base, base.rotated(30))


def get_triadic(base):
    """
    Triadic (120° steps)
    Returns: [base, +120, +240]
    """
    return (base, base.rotated(120), base.rotated(240))


def get_tetradic(base):
    """
    Tetradic (Square scheme, 90° steps)
    Returns: [base, +90, +180, +270]
    """
    return (base, base.rotated(90), base.rotated(180), base.rotated(270))


SCHEME_BUILDERS = {
    HarmonyScheme.MONOCHROMATIC: get_monochromatic,
    HarmonyScheme.COMPLEMENTARY: get_complementary,
    HarmonyScheme.ANALOGOUS: get_analogous,
    HarmonyScheme.TRIADIC: get_triadic,
    HarmonyScheme.TETRADIC: get_tetradic,
}


def generate_scheme(base, scheme):
    """
    Build the ordered palette for `scheme` around `base`.
    `scheme` is a HarmonyScheme or its string value; unknown tags raise UnknownScheme.
    """
    base = HSLColor(*base).with_hue(base[0])
    return SCHEME_BUILDERS[HarmonyScheme.from_value(scheme)](base)


# --- Wheel geometry ---

def angle_to_hue(x, y, center_x, center_y, radius):
    """
    Map a point on the wheel to a hue in degrees.
    Returns None when the point lies outside the circle.
    """
    dx = x - center_x
    dy = y - center_y
    if math.hypot(dx, dy) > radius:
        return None

    angle = math.degrees(math.atan2(dy, dx))
    if angle < 0:
        angle += 360
    return round_half_up(angle) % 360


def hue_to_point(hue, center_x, center_y, distance):
    rad = math.radians(hue)
    return (center_x + distance * math.cos(rad),
            center_y + distance * math.sin(rad))
