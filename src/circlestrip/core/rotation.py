"""
どこで: `src/circlestrip/core/rotation.py`。
何を: 原点まわりの固定角回転（1 ステップ）と、その cos/sin 増分の算出を提供する。
なぜ: 円周上の点を sin/cos の再評価なしに順に求めるため。

点 (x, y) を角 a だけ回転した点 (u, v) は次式で得る。

    u = cos(a) * x + sin(a) * y
    v = sin(a) * -x + cos(a) * y
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit  # type: ignore[attr-defined]

PI = math.acos(-1.0)
PI_MUL_2 = PI * 2.0


@njit(cache=True)  # type: ignore[misc]
def rotate_step(x, y, cos_incr, sin_incr):
    """点 (x, y) を増分角だけ回転した点を返す。

    Parameters
    ----------
    x, y : float
        回転前の点。
    cos_incr, sin_incr : float
        増分角の cos / sin。

    Returns
    -------
    tuple[float, float]
        回転後の点 (x', y')。
    """
    # y' の計算には更新前の x を使う。
    x_new = cos_incr * x + sin_incr * y
    y_new = sin_incr * -x + cos_incr * y
    return x_new, y_new


def rotation_increment(
    count: int,
    dtype: np.dtype,
    clockwise: bool = True,
) -> tuple[np.floating, np.floating]:
    """count 分割の増分角について (cos, sin) を dtype の精度で返す。

    Notes
    -----
    clockwise=True で増分角は +2π/count、False で -2π/count。
    """
    ftype = np.dtype(dtype).type
    if clockwise:
        angle = ftype(PI_MUL_2) / ftype(count)
    else:
        angle = ftype(-PI_MUL_2) / ftype(count)
    return np.cos(angle), np.sin(angle)


__all__ = ["PI", "PI_MUL_2", "rotate_step", "rotation_increment"]
