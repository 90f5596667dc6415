"""Geometry table variants.

Each shape is the local boundary topology of one cell case: the directed
boundary segments (entry side -> exit side) used for path tracing, and the
clockwise polygon covering the filled part of the cell. Names describe the
polygon and, for the cut variants, the sides that carry the cuts.
"""

from __future__ import annotations

from isoline.engine.registry import shape
from isoline.engine.sides import Corner, Side

BL, LB, LT, TL, TR, RT, RB, BR = (
    Side.BL,
    Side.LB,
    Side.LT,
    Side.TL,
    Side.TR,
    Side.RT,
    Side.RB,
    Side.BR,
)
C_BL = Corner.BOTTOM_LEFT
C_TL = Corner.TOP_LEFT
C_TR = Corner.TOP_RIGHT
C_BR = Corner.BOTTOM_RIGHT


# --- Full cell ---

SQUARE = shape("square", polygon=[C_BL, C_TL, C_TR, C_BR])


# --- Triangles: a single corner inside ---

TRIANGLE_BL = shape("triangle_bl", edges=[(LB, BL)], polygon=[LB, BL, C_BL])
TRIANGLE_BR = shape("triangle_br", edges=[(BR, RB)], polygon=[BR, RB, C_BR])
TRIANGLE_TR = shape("triangle_tr", edges=[(RT, TR)], polygon=[RT, TR, C_TR])
TRIANGLE_TL = shape("triangle_tl", edges=[(TL, LT)], polygon=[LT, C_TL, TL])


# --- Tetragons ---

# Half cells bounded by one straight cut
TETRAGON_T = shape("tetragon_t", edges=[(RT, LT)], polygon=[LT, C_TL, C_TR, RT])
TETRAGON_R = shape("tetragon_r", edges=[(BR, TR)], polygon=[BR, TR, C_TR, C_BR])
TETRAGON_B = shape("tetragon_b", edges=[(LB, RB)], polygon=[C_BL, LB, RB, C_BR])
TETRAGON_L = shape("tetragon_l", edges=[(TL, BL)], polygon=[C_BL, C_TL, TL, BL])

# Strips between two parallel cuts
TETRAGON_BL = shape(
    "tetragon_bl", edges=[(BL, LB), (LT, BR)], polygon=[BL, LB, LT, BR]
)
TETRAGON_BR = shape(
    "tetragon_br", edges=[(BL, RT), (RB, BR)], polygon=[BL, RT, RB, BR]
)
TETRAGON_TR = shape(
    "tetragon_tr", edges=[(RB, TL), (TR, RT)], polygon=[RB, TL, TR, RT]
)
TETRAGON_TL = shape(
    "tetragon_tl", edges=[(TR, LB), (LT, TL)], polygon=[TR, LB, LT, TL]
)
TETRAGON_LR = shape(
    "tetragon_lr", edges=[(LT, RT), (RB, LB)], polygon=[LB, LT, RT, RB]
)
TETRAGON_TB = shape(
    "tetragon_tb", edges=[(TR, BR), (BL, TL)], polygon=[BL, TL, TR, BR]
)


# --- Pentagons ---

# One corner cut off
PENTAGON_TR = shape(
    "pentagon_tr", edges=[(TL, RB)], polygon=[C_BL, C_TL, TL, RB, C_BR]
)
PENTAGON_TL = shape(
    "pentagon_tl", edges=[(LB, TR)], polygon=[C_BL, LB, TR, C_TR, C_BR]
)
PENTAGON_BR = shape(
    "pentagon_br", edges=[(RT, BL)], polygon=[C_BL, C_TL, C_TR, RT, BL]
)
PENTAGON_BL = shape(
    "pentagon_bl", edges=[(BR, LT)], polygon=[LT, C_TL, C_TR, C_BR, BR]
)

# Corner plus a strip
PENTAGON_TR_RL = shape(
    "pentagon_tr_rl", edges=[(TL, RT), (RB, LT)], polygon=[LT, C_TL, TL, RT, RB]
)
PENTAGON_RB_BT = shape(
    "pentagon_rb_bt", edges=[(RT, BR), (BL, TR)], polygon=[TR, C_TR, RT, BR, BL]
)
PENTAGON_BL_LR = shape(
    "pentagon_bl_lr", edges=[(BR, LB), (LT, RB)], polygon=[BR, LB, LT, RB, C_BR]
)
PENTAGON_LT_TB = shape(
    "pentagon_lt_tb", edges=[(LB, TL), (TR, BL)], polygon=[C_BL, LB, TL, TR, BL]
)
PENTAGON_BL_TB = shape(
    "pentagon_bl_tb", edges=[(BL, LT), (TL, BR)], polygon=[LT, C_TL, TL, BR, BL]
)
PENTAGON_LT_RL = shape(
    "pentagon_lt_rl", edges=[(LT, TR), (RT, LB)], polygon=[LB, LT, TR, C_TR, RT]
)
PENTAGON_TR_BT = shape(
    "pentagon_tr_bt", edges=[(BR, TL), (TR, RB)], polygon=[TL, TR, RB, C_BR, BR]
)
PENTAGON_RB_LR = shape(
    "pentagon_rb_lr", edges=[(LB, RT), (RB, BL)], polygon=[C_BL, LB, RT, RB, BL]
)


# --- Hexagons ---

HEXAGON_LT_TR = shape(
    "hexagon_lt_tr",
    edges=[(LB, TL), (TR, RB)],
    polygon=[C_BL, LB, TL, TR, RB, C_BR],
)
HEXAGON_BL_LT = shape(
    "hexagon_bl_lt",
    edges=[(BR, LB), (LT, TR)],
    polygon=[BR, LB, LT, TR, C_TR, C_BR],
)
HEXAGON_BL_RB = shape(
    "hexagon_bl_rb",
    edges=[(BL, LT), (RT, BR)],
    polygon=[BL, LT, C_TL, C_TR, RT, BR],
)
HEXAGON_TR_RB = shape(
    "hexagon_tr_rb",
    edges=[(TL, RT), (RB, BL)],
    polygon=[C_BL, C_TL, TL, RT, RB, BL],
)
# Diagonal saddle links
HEXAGON_LT_RB = shape(
    "hexagon_lt_rb",
    edges=[(LB, TR), (RT, BL)],
    polygon=[C_BL, LB, TR, C_TR, RT, BL],
)
HEXAGON_BL_TR = shape(
    "hexagon_bl_tr",
    edges=[(BR, LT), (TL, RB)],
    polygon=[BR, LT, C_TL, TL, RB, C_BR],
)


# --- Heptagons: three-way saddle links ---

HEPTAGON_TR = shape(
    "heptagon_tr",
    edges=[(BL, LB), (LT, TR), (RT, BR)],
    polygon=[BL, LB, LT, TR, C_TR, RT, BR],
)
HEPTAGON_BL = shape(
    "heptagon_bl",
    edges=[(LB, TL), (TR, RT), (RB, BL)],
    polygon=[C_BL, LB, TL, TR, RT, RB, BL],
)
HEPTAGON_TL = shape(
    "heptagon_tl",
    edges=[(BL, LT), (TL, RT), (RB, BR)],
    polygon=[BL, LT, C_TL, TL, RT, RB, BR],
)
HEPTAGON_BR = shape(
    "heptagon_br",
    edges=[(BR, LB), (LT, TL), (TR, RB)],
    polygon=[BR, LB, LT, TL, TR, RB, C_BR],
)


# --- Octagon: every side crossed twice, center inside ---

OCTAGON = shape(
    "octagon",
    edges=[(BL, LB), (LT, TL), (TR, RT), (RB, BR)],
    polygon=[BL, LB, LT, TL, TR, RT, RB, BR],
)
