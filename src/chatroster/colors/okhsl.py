"""sRGB <-> Okhsl conversion.

Okhsl is Björn Ottosson's hue/saturation/lightness model built on OKLab
(https://bottosson.github.io/posts/colorpicker/). Lightness is
perceptually even and saturation is relative to the sRGB gamut boundary
for each hue, so shifting hue at fixed saturation and lightness keeps
colors visually comparable.

The functions here work on plain float channels; `chatroster.colors`
wraps them around the Color and Okhsl models.
"""

import math

# Linear sRGB -> LMS
_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# Non-linear LMS -> OKLab
_LMS_TO_LAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab (a, b) -> non-linear LMS offsets from L
_LAB_TO_LMS = (
    (0.3963377774, 0.2158037573),
    (-0.1055613458, -0.0638541728),
    (-0.0894841775, -1.2914855480),
)

# LMS -> linear sRGB
_LMS_TO_RGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Lightness toe
_K1 = 0.206
_K2 = 0.03
_K3 = (1.0 + _K1) / (1.0 + _K2)

# Saturation piecewise mapping pivot
_MID = 0.8
_MID_INV = 1.25

# Below this chroma a color is treated as grey and has no defined hue
_ACHROMATIC_CHROMA = 1e-6


def srgb_to_linear(x: float) -> float:
    if x >= 0.04045:
        return ((x + 0.055) / 1.055) ** 2.4
    return x / 12.92


def linear_to_srgb(x: float) -> float:
    if x >= 0.0031308:
        return 1.055 * x ** (1.0 / 2.4) - 0.055
    return 12.92 * x


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def linear_srgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_, m_, s_ = (_cbrt(row[0] * r + row[1] * g + row[2] * b) for row in _RGB_TO_LMS)
    return tuple(row[0] * l_ + row[1] * m_ + row[2] * s_ for row in _LMS_TO_LAB)


def oklab_to_linear_srgb(L: float, a: float, b: float) -> tuple[float, float, float]:
    l, m, s = ((L + ka * a + kb * b) ** 3 for ka, kb in _LAB_TO_LMS)
    return tuple(row[0] * l + row[1] * m + row[2] * s for row in _LMS_TO_RGB)


def toe(x: float) -> float:
    """Map OKLab L to Okhsl lightness."""
    y = _K3 * x - _K1
    return 0.5 * (y + math.sqrt(y * y + 4.0 * _K2 * _K3 * x))


def toe_inv(x: float) -> float:
    """Map Okhsl lightness back to OKLab L."""
    return (x * x + _K1 * x) / (_K3 * (x + _K2))


def _compute_max_saturation(a: float, b: float) -> float:
    """Max saturation S = C/L for the hue (a, b) such that the color stays in gamut."""
    if -1.88170328 * a - 0.80936493 * b > 1:
        # red channel hits the boundary first
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = _LMS_TO_RGB[0]
    elif 1.81444104 * a - 1.19445276 * b > 1:
        # green
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = _LMS_TO_RGB[1]
    else:
        # blue
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = _LMS_TO_RGB[2]

    saturation = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l, k_m, k_s = (ka * a + kb * b for ka, kb in _LAB_TO_LMS)

    # one Halley step on the polynomial approximation
    l_ = 1.0 + saturation * k_l
    m_ = 1.0 + saturation * k_m
    s_ = 1.0 + saturation * k_s

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    l_ds = 3.0 * k_l * l_ * l_
    m_ds = 3.0 * k_m * m_ * m_
    s_ds = 3.0 * k_s * s_ * s_

    l_ds2 = 6.0 * k_l * k_l * l_
    m_ds2 = 6.0 * k_m * k_m * m_
    s_ds2 = 6.0 * k_s * k_s * s_

    f = wl * l + wm * m + ws * s
    f1 = wl * l_ds + wm * m_ds + ws * s_ds
    f2 = wl * l_ds2 + wm * m_ds2 + ws * s_ds2

    return saturation - f * f1 / (f1 * f1 - 0.5 * f * f2)


def _find_cusp(a: float, b: float) -> tuple[float, float]:
    """(L, C) of the most saturated in-gamut color for the hue (a, b)."""
    s_cusp = _compute_max_saturation(a, b)
    rgb_at_max = oklab_to_linear_srgb(1.0, s_cusp * a, s_cusp * b)
    l_cusp = (1.0 / max(rgb_at_max)) ** (1.0 / 3.0)
    return l_cusp, l_cusp * s_cusp


def _find_gamut_intersection(
    a: float, b: float, L1: float, C1: float, L0: float, cusp: tuple[float, float]
) -> float:
    """Distance t along L0 -> (L1, C1) where the line leaves the sRGB gamut."""
    cusp_l, cusp_c = cusp

    if ((L1 - L0) * cusp_c - (cusp_l - L0) * C1) <= 0.0:
        # lower half of the gamut triangle, the boundary is a straight line
        return cusp_c * L0 / (C1 * cusp_l + cusp_c * (L0 - L1))

    t = cusp_c * (L0 - 1.0) / (C1 * (cusp_l - 1.0) + cusp_c * (L0 - L1))

    # upper half is curved: refine with one Halley step per channel
    d_l = L1 - L0
    d_c = C1
    k_l, k_m, k_s = (ka * a + kb * b for ka, kb in _LAB_TO_LMS)

    l_dt = d_l + d_c * k_l
    m_dt = d_l + d_c * k_m
    s_dt = d_l + d_c * k_s

    L = L0 * (1.0 - t) + t * L1
    C = t * C1

    l_ = L + C * k_l
    m_ = L + C * k_m
    s_ = L + C * k_s

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    ldt = 3.0 * l_dt * l_ * l_
    mdt = 3.0 * m_dt * m_ * m_
    sdt = 3.0 * s_dt * s_ * s_

    ldt2 = 6.0 * l_dt * l_dt * l_
    mdt2 = 6.0 * m_dt * m_dt * m_
    sdt2 = 6.0 * s_dt * s_dt * s_

    steps = []
    for wl, wm, ws in _LMS_TO_RGB:
        channel = wl * l + wm * m + ws * s - 1.0
        channel1 = wl * ldt + wm * mdt + ws * sdt
        channel2 = wl * ldt2 + wm * mdt2 + ws * sdt2
        u = channel1 / (channel1 * channel1 - 0.5 * channel * channel2)
        steps.append(-channel * u if u >= 0.0 else math.inf)

    return t + min(steps)


def _get_st_mid(a: float, b: float) -> tuple[float, float]:
    """Smooth approximation of the gamut cusp slopes (S, T) for a hue."""
    s = 0.11516993 + 1.0 / (
        7.44778970
        + 4.16894999 * b
        + a * (
            -2.19557347
            + 1.75198401 * b
            + a * (-2.13704948 - 10.02301043 * b + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a))
        )
    )
    t = 0.11239642 + 1.0 / (
        1.61320320
        - 0.68124379 * b
        + a * (
            0.40370612
            + 0.90148123 * b
            + a * (-0.27087943 + 0.61223990 * b + a * (0.00299215 - 0.45399568 * b - 0.14661872 * a))
        )
    )
    return s, t


def _get_cs(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Chroma anchors (C_0, C_mid, C_max) of the saturation scale at lightness L."""
    cusp = _find_cusp(a, b)
    c_max = _find_gamut_intersection(a, b, L, 1.0, L, cusp)

    cusp_l, cusp_c = cusp
    st_max_s = cusp_c / cusp_l
    st_max_t = cusp_c / (1.0 - cusp_l)

    k = c_max / min(L * st_max_s, (1.0 - L) * st_max_t)

    st_mid_s, st_mid_t = _get_st_mid(a, b)
    c_a = L * st_mid_s
    c_b = (1.0 - L) * st_mid_t
    c_mid = 0.9 * k * math.sqrt(math.sqrt(1.0 / (1.0 / c_a ** 4 + 1.0 / c_b ** 4)))

    # hue independent shape for C_0
    c_a = L * 0.4
    c_b = (1.0 - L) * 0.8
    c_0 = math.sqrt(1.0 / (1.0 / (c_a * c_a) + 1.0 / (c_b * c_b)))

    return c_0, c_mid, c_max


def srgb_to_okhsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert gamma-encoded sRGB to (hue degrees, saturation, lightness).

    Greys have no hue: they come back with hue 0.0 and saturation 0.0.
    Black and white (L at or beyond 0 or 1) have no defined saturation
    either and come back with NaN, which callers are expected to normalize.
    """
    L, lab_a, lab_b = linear_srgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    lightness = toe(L)

    C = math.hypot(lab_a, lab_b)
    if not 0.0 < L < 1.0:
        return 0.0, math.nan, lightness
    if C < _ACHROMATIC_CHROMA:
        return 0.0, 0.0, lightness

    a_ = lab_a / C
    b_ = lab_b / C
    hue = (0.5 + 0.5 * math.atan2(-lab_b, -lab_a) / math.pi) * 360.0

    c_0, c_mid, c_max = _get_cs(L, a_, b_)

    if C < c_mid:
        k_1 = _MID * c_0
        k_2 = 1.0 - k_1 / c_mid
        t = C / (k_1 + k_2 * C)
        saturation = t * _MID
    else:
        k_0 = c_mid
        k_1 = (1.0 - _MID) * c_mid * c_mid * _MID_INV * _MID_INV / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        t = (C - k_0) / (k_1 + k_2 * (C - k_0))
        saturation = _MID + (1.0 - _MID) * t

    return hue % 360.0, saturation, lightness


def okhsl_to_srgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """Convert (hue degrees, saturation, lightness) to gamma-encoded sRGB.

    The result is not clamped; out-of-gamut inputs give channels outside
    [0, 1].
    """
    if lightness >= 1.0:
        return 1.0, 1.0, 1.0
    if lightness <= 0.0:
        return 0.0, 0.0, 0.0

    turns = (hue % 360.0) / 360.0
    a_ = math.cos(2.0 * math.pi * turns)
    b_ = math.sin(2.0 * math.pi * turns)
    L = toe_inv(lightness)

    c_0, c_mid, c_max = _get_cs(L, a_, b_)

    if saturation < _MID:
        t = _MID_INV * saturation
        k_1 = _MID * c_0
        k_2 = 1.0 - k_1 / c_mid
        C = t * k_1 / (1.0 - k_2 * t)
    else:
        t = (saturation - _MID) / (1.0 - _MID)
        k_0 = c_mid
        k_1 = (1.0 - _MID) * c_mid * c_mid * _MID_INV * _MID_INV / c_0
        k_2 = 1.0 - k_1 / (c_max - c_mid)
        C = k_0 + t * k_1 / (1.0 - k_2 * t)

    r, g, b = oklab_to_linear_srgb(L, C * a_, C * b_)
    return linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)
