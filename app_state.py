import logging
from typing import NamedTuple, Tuple

from color_logic import (HSLColor, HarmonyScheme, angle_to_hue, generate_scheme,
                         hex_to_hsl, hsl_to_hex, parse_hex)

logger = logging.getLogger(__name__)


class PaletteState(NamedTuple):
    """
    Everything the window renders: the base color, the active scheme and
    the palette derived from them. Updates return a new state and never
    mutate the old one.
    """
    base: HSLColor
    scheme: HarmonyScheme
    palette: Tuple[HSLColor, ...]
    base_hex: str

    @classmethod
    def create(cls, hex_value, scheme=HarmonyScheme.COMPLEMENTARY):
        base_hex = parse_hex(hex_value).hex
        return cls._build(hex_to_hsl(base_hex), scheme, base_hex)

    @classmethod
    def _build(cls, base, scheme, base_hex):
        scheme = HarmonyScheme.from_value(scheme)
        return cls(base, scheme, generate_scheme(base, scheme), base_hex)

    def with_hex(self, text):
        base_hex = parse_hex(text).hex
        base = hex_to_hsl(base_hex)
        logger.debug("Base color %s -> %s", base_hex, tuple(base))
        return self._build(base, self.scheme, base_hex)

    def with_scheme(self, scheme):
        logger.debug("Scheme -> %s", scheme)
        return self._build(self.base, scheme, self.base_hex)

    def with_hue(self, hue):
        base = self.base.with_hue(hue)
        return self._build(base, self.scheme, hsl_to_hex(*base))

    def with_wheel_click(self, x, y, center_x, center_y, radius):
        hue = angle_to_hue(x, y, center_x, center_y, radius)
        if hue is None:
            return self
        logger.debug("Wheel click (%.1f, %.1f) -> hue %d", x, y, hue)
        return self.with_hue(hue)

    @property
    def palette_hex(self):
        return [hsl_to_hex(*c) for c in self.palette]
