# どこで: `src/circlestrip/core/strip.py`。
# 何を: 三角形ストリップ順の点列から三角形リスト用インデックスと符号付き面積を求める。
# なぜ: 生成した点列がストリップとして一貫した巻き順になっているかを純粋関数で確かめるため。

from __future__ import annotations

from functools import lru_cache

import numpy as np
from numba import njit  # type: ignore[attr-defined]


def build_strip_triangles(count: int) -> np.ndarray:
    """N 点の三角形ストリップを三角形リストに展開したインデックス配列を返す。

    Returns
    -------
    np.ndarray
        uint32 型 shape (max(N-2, 0), 3)。k 番目の三角形は頂点 (k, k+1, k+2) で、
        k が奇数のものは先頭 2 頂点を入れ替えて全三角形の巻き順を揃える。

    Notes
    -----
    indices は N だけで決まるため LRU キャッシュし、writeable=False で返す。
    """
    n = int(count)
    if n < 0:
        raise ValueError(f"count は 0 以上である必要がある: got={n}")
    return _build_strip_triangles_cached(n)


def strip_signed_areas(points: np.ndarray) -> np.ndarray:
    """ストリップの各三角形について、巻き順補正後の符号付き面積の 2 倍を返す。

    Parameters
    ----------
    points : np.ndarray
        shape (N, 2) または (2N,) の点列。

    Returns
    -------
    np.ndarray
        float64 型 shape (max(N-2, 0),)。時計回りの三角形は負、反時計回りは正。
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    triangles = build_strip_triangles(pts.shape[0])
    if triangles.shape[0] == 0:
        return np.zeros((0,), dtype=np.float64)
    return _signed_areas_numba(pts, triangles)


@lru_cache(maxsize=64)
def _build_strip_triangles_cached(count: int) -> np.ndarray:
    out = _build_strip_triangles_numba(count)
    out.setflags(write=False)
    return out


@njit(cache=True)  # type: ignore[misc]
def _build_strip_triangles_numba(count):
    """ストリップ展開インデックスを生成する（Numba 版）。"""
    n_tri = count - 2
    if n_tri < 0:
        n_tri = 0
    out = np.empty((n_tri, 3), dtype=np.uint32)
    for k in range(n_tri):
        if k % 2 == 0:
            out[k, 0] = k
            out[k, 1] = k + 1
        else:
            out[k, 0] = k + 1
            out[k, 1] = k
        out[k, 2] = k + 2
    return out


@njit(cache=True)  # type: ignore[misc]
def _signed_areas_numba(points, triangles):
    """三角形ごとの外積 (b - a) x (c - a) を返す（Numba 版）。"""
    n_tri = triangles.shape[0]
    out = np.empty((n_tri,), dtype=np.float64)
    for k in range(n_tri):
        a = triangles[k, 0]
        b = triangles[k, 1]
        c = triangles[k, 2]
        abx = points[b, 0] - points[a, 0]
        aby = points[b, 1] - points[a, 1]
        acx = points[c, 0] - points[a, 0]
        acy = points[c, 1] - points[a, 1]
        out[k] = abx * acy - aby * acx
    return out


__all__ = ["build_strip_triangles", "strip_signed_areas"]
