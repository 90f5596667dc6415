"""Case code -> shape lookup tables.

Contour codes pack one bit per corner (1 = at or above the threshold) as
``x0 | x1<<1 | x2<<2 | x3<<3``. Band codes pack one trit per corner
(0 below, 1 within, 2 above) two bits apart as ``t0 | t1<<2 | t2<<4 | t3<<6``.

Saddle codes cannot be resolved from the corners alone; they map to one
resolution per center class, where the center class is the mean of the four
corners classified like a corner.
"""

from __future__ import annotations

Resolution = tuple[str, ...]

NO_SHAPES: Resolution = ()

# --- Isocontours ---

CONTOUR_EMPTY = 0
CONTOUR_FULL = 15

CONTOUR_CASES: dict[int, Resolution] = {
    CONTOUR_EMPTY: NO_SHAPES,
    CONTOUR_FULL: ("square",),
    # single corner inside
    1: ("triangle_bl",),
    2: ("triangle_br",),
    4: ("triangle_tr",),
    8: ("triangle_tl",),
    # two adjacent corners inside
    3: ("tetragon_b",),
    6: ("tetragon_r",),
    12: ("tetragon_t",),
    9: ("tetragon_l",),
    # single corner outside
    7: ("pentagon_tl",),
    11: ("pentagon_tr",),
    13: ("pentagon_br",),
    14: ("pentagon_bl",),
}

CONTOUR_SADDLES: dict[int, tuple[Resolution, Resolution]] = {
    5: (("triangle_bl", "triangle_tr"), ("hexagon_lt_rb",)),
    10: (("triangle_tl", "triangle_br"), ("hexagon_bl_tr",)),
}


# --- Isobands ---

BAND_EMPTY_BELOW = 0
BAND_FULL = 85
BAND_EMPTY_ABOVE = 170

BAND_CASES: dict[int, Resolution] = {
    BAND_EMPTY_BELOW: NO_SHAPES,
    BAND_EMPTY_ABOVE: NO_SHAPES,
    BAND_FULL: ("square",),
    # single triangle
    169: ("triangle_bl",),
    166: ("triangle_br",),
    154: ("triangle_tr",),
    106: ("triangle_tl",),
    1: ("triangle_bl",),
    4: ("triangle_br",),
    16: ("triangle_tr",),
    64: ("triangle_tl",),
    # single trapezoid
    168: ("tetragon_bl",),
    162: ("tetragon_br",),
    138: ("tetragon_tr",),
    42: ("tetragon_tl",),
    2: ("tetragon_bl",),
    8: ("tetragon_br",),
    32: ("tetragon_tr",),
    128: ("tetragon_tl",),
    # single rectangle
    5: ("tetragon_b",),
    20: ("tetragon_r",),
    80: ("tetragon_t",),
    65: ("tetragon_l",),
    165: ("tetragon_b",),
    150: ("tetragon_r",),
    90: ("tetragon_t",),
    105: ("tetragon_l",),
    160: ("tetragon_lr",),
    130: ("tetragon_tb",),
    10: ("tetragon_lr",),
    40: ("tetragon_tb",),
    # single pentagon
    101: ("pentagon_tr",),
    149: ("pentagon_tl",),
    86: ("pentagon_bl",),
    89: ("pentagon_br",),
    69: ("pentagon_tr",),
    21: ("pentagon_tl",),
    84: ("pentagon_bl",),
    81: ("pentagon_br",),
    96: ("pentagon_tr_rl",),
    24: ("pentagon_rb_bt",),
    6: ("pentagon_bl_lr",),
    129: ("pentagon_lt_tb",),
    74: ("pentagon_tr_rl",),
    146: ("pentagon_rb_bt",),
    164: ("pentagon_bl_lr",),
    41: ("pentagon_lt_tb",),
    66: ("pentagon_bl_tb",),
    144: ("pentagon_lt_rl",),
    36: ("pentagon_tr_bt",),
    9: ("pentagon_rb_lr",),
    104: ("pentagon_bl_tb",),
    26: ("pentagon_lt_rl",),
    134: ("pentagon_tr_bt",),
    161: ("pentagon_rb_lr",),
    # single hexagon
    37: ("hexagon_lt_tr",),
    148: ("hexagon_bl_lt",),
    82: ("hexagon_bl_rb",),
    73: ("hexagon_tr_rb",),
    133: ("hexagon_lt_tr",),
    22: ("hexagon_bl_lt",),
    88: ("hexagon_bl_rb",),
    97: ("hexagon_tr_rb",),
    145: ("hexagon_lt_rb",),
    25: ("hexagon_lt_rb",),
    70: ("hexagon_bl_tr",),
    100: ("hexagon_bl_tr",),
}

# center class 0 (below) / 1 (within) / 2 (above)
BAND_SADDLES: dict[int, tuple[Resolution, Resolution, Resolution]] = {
    # 6-sided
    17: (("triangle_bl", "triangle_tr"), ("hexagon_lt_rb",), ("hexagon_lt_rb",)),
    68: (("triangle_tl", "triangle_br"), ("hexagon_bl_tr",), ("hexagon_bl_tr",)),
    153: (("hexagon_lt_rb",), ("hexagon_lt_rb",), ("triangle_bl", "triangle_tr")),
    102: (("hexagon_bl_tr",), ("hexagon_bl_tr",), ("triangle_tl", "triangle_br")),
    # 7-sided
    152: (("heptagon_tr",), ("heptagon_tr",), ("triangle_tr", "tetragon_bl")),
    137: (("heptagon_bl",), ("heptagon_bl",), ("triangle_bl", "tetragon_tr")),
    98: (("heptagon_tl",), ("heptagon_tl",), ("triangle_tl", "tetragon_br")),
    38: (("heptagon_br",), ("heptagon_br",), ("triangle_br", "tetragon_tl")),
    18: (("triangle_tr", "tetragon_bl"), ("heptagon_tr",), ("heptagon_tr",)),
    33: (("triangle_bl", "tetragon_tr"), ("heptagon_bl",), ("heptagon_bl",)),
    72: (("triangle_tl", "tetragon_br"), ("heptagon_tl",), ("heptagon_tl",)),
    132: (("triangle_br", "tetragon_tl"), ("heptagon_br",), ("heptagon_br",)),
    # 8-sided
    136: (("tetragon_tl", "tetragon_br"), ("octagon",), ("tetragon_bl", "tetragon_tr")),
    34: (("tetragon_bl", "tetragon_tr"), ("octagon",), ("tetragon_tl", "tetragon_br")),
}


def band_code(t0: int, t1: int, t2: int, t3: int) -> int:
    return t0 | (t1 << 2) | (t2 << 4) | (t3 << 6)


def contour_code(b0: int, b1: int, b2: int, b3: int) -> int:
    return b0 | (b1 << 1) | (b2 << 2) | (b3 << 3)


def contour_shapes(code: int, center: int) -> Resolution:
    if code in CONTOUR_SADDLES:
        return CONTOUR_SADDLES[code][center]
    return CONTOUR_CASES[code]


def band_shapes(code: int, center: int) -> Resolution:
    if code in BAND_SADDLES:
        return BAND_SADDLES[code][center]
    return BAND_CASES[code]
