"""create_circle_quarter（1/4 円対称）と create_circle の一致に関するテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from circlestrip.core.circle import create_circle, create_circle_quarter

COUNTS = list(range(1, 65))


def _both(count: int, *, clockwise: bool, dtype) -> tuple[np.ndarray, np.ndarray]:
    half = np.zeros((2 * count,), dtype=dtype)
    quarter = np.zeros((2 * count,), dtype=dtype)
    create_circle(count, half, clockwise=clockwise)
    create_circle_quarter(count, quarter, clockwise=clockwise)
    return half, quarter


@pytest.mark.parametrize("count", COUNTS)
@pytest.mark.parametrize("clockwise", [True, False])
def test_quarter_matches_half_float64(count: int, clockwise: bool) -> None:
    half, quarter = _both(count, clockwise=clockwise, dtype=np.float64)
    np.testing.assert_allclose(quarter, half, rtol=0.0, atol=1e-12)


@pytest.mark.parametrize("count", COUNTS)
def test_quarter_matches_half_float32(count: int) -> None:
    half, quarter = _both(count, clockwise=True, dtype=np.float32)
    np.testing.assert_allclose(quarter, half, rtol=0.0, atol=1e-5)


@pytest.mark.parametrize("count", [c for c in COUNTS if c % 2 == 1])
def test_quarter_is_identical_for_odd_counts(count: int) -> None:
    half, quarter = _both(count, clockwise=True, dtype=np.float32)
    np.testing.assert_array_equal(quarter, half)


@pytest.mark.parametrize("count", [c for c in COUNTS if c % 2 == 0])
def test_quarter_rotated_prefix_is_identical(count: int) -> None:
    """偶数: 回転で求める先頭部分はビット単位で一致する。"""
    half, quarter = _both(count, clockwise=True, dtype=np.float32)
    n_prefix = 2 * (1 + 2 * ((count // 2) // 2))
    np.testing.assert_array_equal(quarter[:n_prefix], half[:n_prefix])
    assert quarter[-2:].tolist() == [-1.0, 0.0]


@pytest.mark.parametrize("count", [c for c in COUNTS if c % 2 == 0])
def test_quarter_reflected_points_are_exact_sign_flips(count: int) -> None:
    """反転で求めた点は、書き込み済みの点の x を反転した値そのもの。"""
    _, quarter = _both(count, clockwise=True, dtype=np.float32)
    pts = quarter.reshape(-1, 2)
    rotated = pts[1 : 1 + 2 * ((count // 2) // 2) : 2]
    reflected = pts[1 + 2 * ((count // 2) // 2) : -1 : 2]
    assert reflected.shape[0] <= rotated.shape[0]
    for p in reflected:
        match = (rotated[:, 0] == -p[0]) & (rotated[:, 1] == p[1])
        assert match.any()


def test_quarter_n8_expected_layout() -> None:
    out = np.zeros((16,), dtype=np.float64)
    create_circle_quarter(8, out)
    r = np.sqrt(0.5)
    np.testing.assert_allclose(
        out.reshape(-1, 2),
        [
            [1.0, 0.0],
            [r, -r],
            [r, r],
            [0.0, -1.0],
            [0.0, 1.0],
            [-r, -r],
            [-r, r],
            [-1.0, 0.0],
        ],
        rtol=0.0,
        atol=1e-12,
    )


def test_quarter_is_deterministic() -> None:
    a = np.zeros((2 * 30,), dtype=np.float64)
    b = np.zeros((2 * 30,), dtype=np.float64)
    create_circle_quarter(30, a)
    create_circle_quarter(30, b)
    np.testing.assert_array_equal(a, b)
