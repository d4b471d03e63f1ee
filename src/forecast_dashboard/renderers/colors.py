"""Temperature colour scale.

Stops are interpolated in CIE L*a*b* so that equal temperature steps look
like equal colour steps (sRGB -> linear -> XYZ (D65) -> Lab and back).
"""

from __future__ import annotations

# (temperature F, hex colour), ascending
TEMPERATURE_STOPS: list[tuple[float, str]] = [
    (-10.0, "#4b2991"),
    (10.0, "#3b5bdb"),
    (32.0, "#4dabf7"),
    (50.0, "#63e6be"),
    (65.0, "#a9e34b"),
    (75.0, "#ffd43b"),
    (85.0, "#ff922b"),
    (95.0, "#f03e3e"),
    (110.0, "#a61e4d"),
]

# D65 reference white
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883
_DELTA = 6 / 29

Lab = tuple[float, float, float]


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _to_linear(c: float) -> float:
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _to_srgb(c: float) -> float:
    return 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055


def _f(t: float) -> float:
    return t ** (1 / 3) if t > _DELTA**3 else t / (3 * _DELTA**2) + 4 / 29


def _f_inv(t: float) -> float:
    return t**3 if t > _DELTA else 3 * _DELTA**2 * (t - 4 / 29)


def rgb_to_lab(rgb: tuple[int, int, int]) -> Lab:
    r, g, b = (_to_linear(c / 255) for c in rgb)
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    fx, fy, fz = _f(x / _XN), _f(y / _YN), _f(z / _ZN)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_rgb(lab: Lab) -> tuple[int, int, int]:
    lightness, a, b = lab
    fy = (lightness + 16) / 116
    x = _XN * _f_inv(fy + a / 500)
    y = _YN * _f_inv(fy)
    z = _ZN * _f_inv(fy - b / 200)
    r = 3.2404542 * x - 1.5371385 * y - 0.4985314 * z
    g = -0.9692660 * x + 1.8760108 * y + 0.0415560 * z
    bl = 0.0556434 * x - 0.2040259 * y + 1.0572252 * z

    def channel(c: float) -> int:
        return max(0, min(255, round(_to_srgb(max(0.0, c)) * 255)))

    return channel(r), channel(g), channel(bl)


def temperature_to_color(fahrenheit: float | None) -> str:
    """Hex colour for a temperature; out-of-range values clamp to the end stops."""
    if fahrenheit is None:
        return "#888888"
    if fahrenheit <= TEMPERATURE_STOPS[0][0]:
        return TEMPERATURE_STOPS[0][1]
    if fahrenheit >= TEMPERATURE_STOPS[-1][0]:
        return TEMPERATURE_STOPS[-1][1]

    for (t0, c0), (t1, c1) in zip(TEMPERATURE_STOPS, TEMPERATURE_STOPS[1:], strict=False):
        if t0 <= fahrenheit <= t1:
            frac = (fahrenheit - t0) / (t1 - t0)
            lab0, lab1 = rgb_to_lab(hex_to_rgb(c0)), rgb_to_lab(hex_to_rgb(c1))
            mixed = tuple(p + (q - p) * frac for p, q in zip(lab0, lab1, strict=True))
            return rgb_to_hex(lab_to_rgb(mixed))  # type: ignore[arg-type]
    return TEMPERATURE_STOPS[-1][1]
