"""create_circle（半円対称）の出力内容に関するテスト群。"""

from __future__ import annotations

import logging

import numpy as np
import pytest

from circlestrip.core.circle import (
    DRIFT_WARN_COUNT,
    circle_points,
    create_circle,
    create_circle_quarter,
)


def _generate(count: int, *, clockwise: bool = True, dtype=np.float64) -> np.ndarray:
    out = np.zeros((2 * count,), dtype=dtype)
    create_circle(count, out, clockwise=clockwise)
    return out


def _regular_polygon(count: int) -> np.ndarray:
    """開始点を奇数なら上端、偶数なら右端に置いた正 N 角形の頂点集合。"""
    angles = 2.0 * np.pi * np.arange(count) / count
    if count % 2 == 1:
        return np.stack([np.sin(angles), np.cos(angles)], axis=1)
    return np.stack([np.cos(angles), np.sin(angles)], axis=1)


def test_create_circle_n4_even_branch() -> None:
    """偶数: 右端、回転点と上下反転、左端の順に並ぶ。"""
    out = _generate(4)
    np.testing.assert_allclose(
        out,
        [1.0, 0.0, 0.0, -1.0, 0.0, 1.0, -1.0, 0.0],
        rtol=0.0,
        atol=1e-12,
    )


def test_create_circle_n5_odd_branch() -> None:
    """奇数: 上端から始め、各回転点の直後に左右反転点を置く。"""
    out = _generate(5)
    assert out.shape == (10,)
    assert out[0] == 0.0
    assert out[1] == 1.0
    for k in (2, 6):
        assert out[k + 2] == -out[k]
        assert out[k + 3] == out[k + 1]
    np.testing.assert_allclose(
        out[2:4],
        [np.sin(2.0 * np.pi / 5), np.cos(2.0 * np.pi / 5)],
        rtol=0.0,
        atol=1e-12,
    )


def test_create_circle_n1_emits_only_top() -> None:
    out = np.full((2,), np.nan)
    create_circle(1, out)
    assert out.tolist() == [0.0, 1.0]


def test_create_circle_n2_emits_right_and_left_ends() -> None:
    out = np.full((4,), np.nan)
    create_circle(2, out)
    assert out.tolist() == [1.0, 0.0, -1.0, 0.0]


def test_create_circle_fills_every_slot() -> None:
    for count in range(1, 33):
        out = np.full((2 * count,), np.nan)
        create_circle(count, out)
        assert not np.isnan(out).any(), count


@pytest.mark.parametrize("dtype, atol", [(np.float32, 1e-5), (np.float64, 1e-12)])
def test_create_circle_points_lie_on_unit_circle(dtype, atol: float) -> None:
    for count in range(1, 65):
        pts = _generate(count, dtype=dtype).reshape(-1, 2).astype(np.float64)
        radius2 = pts[:, 0] ** 2 + pts[:, 1] ** 2
        assert np.max(np.abs(radius2 - 1.0)) < atol, count


def test_create_circle_matches_regular_polygon_vertices() -> None:
    """出力は（順序を除き）正 N 角形の頂点集合と一致し、重複を含まない。"""
    for count in range(1, 65):
        pts = _generate(count).reshape(-1, 2)
        expected = _regular_polygon(count)
        dist = np.linalg.norm(pts[:, None, :] - expected[None, :, :], axis=2)
        assert np.all(dist.min(axis=1) < 1e-9), count
        assert sorted(dist.argmin(axis=1).tolist()) == list(range(count)), count


def test_create_circle_counter_clockwise_is_reflection() -> None:
    """巻き順の反転は、奇数なら x、偶数なら y の符号反転になる。"""
    for count in range(1, 65):
        cw = _generate(count, clockwise=True).reshape(-1, 2)
        ccw = _generate(count, clockwise=False).reshape(-1, 2)
        axis = 0 if count % 2 == 1 else 1
        mirrored = cw.copy()
        mirrored[:, axis] *= -1.0
        np.testing.assert_allclose(ccw, mirrored, rtol=0.0, atol=1e-12)


def test_create_circle_counter_clockwise_visits_same_vertices() -> None:
    for count in (3, 8, 13):
        cw = _generate(count, clockwise=True).reshape(-1, 2)
        ccw = _generate(count, clockwise=False).reshape(-1, 2)
        dist = np.linalg.norm(cw[:, None, :] - ccw[None, :, :], axis=2)
        assert np.all(dist.min(axis=1) < 1e-9)


def test_create_circle_is_deterministic() -> None:
    a = _generate(37, dtype=np.float32)
    b = _generate(37, dtype=np.float32)
    np.testing.assert_array_equal(a, b)


def test_create_circle_accepts_point_shaped_buffer() -> None:
    """shape (N, 2) のバッファにもそのまま書き込む。"""
    out = np.zeros((6, 2), dtype=np.float32)
    create_circle(6, out)
    np.testing.assert_array_equal(out.reshape(-1), _generate(6, dtype=np.float32))


def test_create_circle_float32_uses_single_precision_increment() -> None:
    out = _generate(5, dtype=np.float32)
    angle = np.float32(2.0 * np.pi) / np.float32(5)
    assert out.dtype == np.float32
    assert out[2] == np.sin(angle)
    assert out[3] == np.cos(angle)


def test_create_circle_warns_on_large_count(caplog: pytest.LogCaptureFixture) -> None:
    count = DRIFT_WARN_COUNT + 1
    out = np.zeros((2 * count,), dtype=np.float64)
    with caplog.at_level(logging.WARNING, logger="circlestrip.core.circle"):
        create_circle(count, out)
    assert any("count=" in r.getMessage() for r in caplog.records)
    assert out[0] == 0.0 and out[1] == 1.0


def test_create_circle_does_not_warn_on_small_count(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="circlestrip.core.circle"):
        _generate(DRIFT_WARN_COUNT)
    assert not caplog.records


def test_circle_points_allocates_point_array() -> None:
    pts = circle_points(8, method="quarter", dtype=np.float64)
    assert pts.shape == (8, 2)
    assert pts.dtype == np.float64
    expected = np.zeros((16,), dtype=np.float64)
    create_circle_quarter(8, expected)
    np.testing.assert_array_equal(pts.reshape(-1), expected)


def test_circle_points_defaults_to_half_float32() -> None:
    pts = circle_points(5)
    assert pts.dtype == np.float32
    np.testing.assert_array_equal(pts.reshape(-1), _generate(5, dtype=np.float32))


def test_circle_points_rejects_unknown_method() -> None:
    with pytest.raises(ValueError):
        circle_points(5, method="eighth")
