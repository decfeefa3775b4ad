# どこで: `src/circlestrip/core/__init__.py`。
# 何を: 円点列生成のコア API を再公開する。
# なぜ: 利用側の import を `circlestrip.core` に揃えるため。

from __future__ import annotations

from circlestrip.core.circle import (
    DRIFT_WARN_COUNT,
    GENERATORS,
    circle_points,
    create_circle,
    create_circle_quarter,
)
from circlestrip.core.errors import (
    CircleStripError,
    DegenerateInputError,
    NullOutputError,
    SizeMismatchError,
    UnsupportedDtypeError,
)
from circlestrip.core.rotation import PI, PI_MUL_2, rotate_step, rotation_increment
from circlestrip.core.strip import build_strip_triangles, strip_signed_areas

__all__ = [
    "CircleStripError",
    "DRIFT_WARN_COUNT",
    "DegenerateInputError",
    "GENERATORS",
    "NullOutputError",
    "PI",
    "PI_MUL_2",
    "SizeMismatchError",
    "UnsupportedDtypeError",
    "build_strip_triangles",
    "circle_points",
    "create_circle",
    "create_circle_quarter",
    "rotate_step",
    "rotation_increment",
    "strip_signed_areas",
]
