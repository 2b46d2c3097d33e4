"""Tests for Morton encoding, Z-order traversal and range queries."""

from types import SimpleNamespace

import pytest

from showcase import (
    InvalidArgumentError,
    MortonPoint,
    morton_decode,
    morton_encode,
    query_sorted,
    range_query,
    to_binary_string,
    z_order_sort,
    z_order_traversal,
)


def test_encode_small_values():
    assert morton_encode(0, 0) == 0
    assert morton_encode(1, 0) == 1
    assert morton_encode(0, 1) == 2
    assert morton_encode(1, 1) == 3
    # x=101, y=011 -> 01 10 11
    assert morton_encode(5, 3) == 0b011011


def test_encode_extremes():
    assert morton_encode(65535, 0) == 0x55555555
    assert morton_encode(0, 65535) == 0xAAAAAAAA
    assert morton_encode(65535, 65535) == 0xFFFFFFFF


def test_encode_ignores_high_bits():
    """Only the low 16 bits of each coordinate are interleaved."""
    assert morton_encode(65536, 0) == 0
    assert morton_encode(65536 + 5, 3) == morton_encode(5, 3)


def test_decode_round_trip():
    for x in range(0, 65536, 257):
        for y in (0, 1, 2, 255, 4096, 32768, 65534, 65535):
            assert morton_decode(morton_encode(x, y)) == (x, y)


def test_y_step_sets_odd_bits_only():
    """Moving along y never touches the even (x) bit positions."""
    for y in range(0, 1024, 7):
        diff = morton_encode(9, y) ^ morton_encode(9, y + 1)
        assert diff & 0x55555555 == 0


def test_encode_is_injective_on_small_grid():
    codes = {morton_encode(x, y) for x in range(64) for y in range(64)}
    assert len(codes) == 64 * 64


def test_invalid_coordinates():
    with pytest.raises(InvalidArgumentError):
        morton_encode(-1, 0)
    with pytest.raises(InvalidArgumentError):
        morton_encode(1.5, 0)
    with pytest.raises(InvalidArgumentError):
        morton_encode(True, 0)
    with pytest.raises(InvalidArgumentError):
        morton_decode(-3)


def test_traversal_2x2():
    pts = z_order_traversal(2, 2)
    assert [(p.x, p.y) for p in pts] == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert [p.code for p in pts] == [0, 1, 2, 3]


def test_traversal_4x4_codes_are_dense():
    pts = z_order_traversal(4, 4)
    assert [p.code for p in pts] == list(range(16))
    assert pts[4] == MortonPoint(2, 0, 4)


def test_traversal_non_square():
    pts = z_order_traversal(3, 2)
    assert [(p.x, p.y) for p in pts] == [
        (0, 0), (1, 0), (0, 1), (1, 1), (2, 0), (2, 1),
    ]


def test_traversal_empty():
    assert z_order_traversal(0, 5) == []
    assert z_order_traversal(5, 0) == []
    with pytest.raises(InvalidArgumentError):
        z_order_traversal(-1, 2)


def test_range_query_inclusive(grid):
    hits = range_query(grid, 1, 1, 2, 3)
    assert {(p.x, p.y) for p in hits} == {
        (x, y) for x in (1, 2) for y in (1, 2, 3)
    }


def test_range_query_preserves_input_order():
    pts = [SimpleNamespace(x=3, y=3), SimpleNamespace(x=0, y=0),
           SimpleNamespace(x=1, y=1)]
    assert range_query(pts, 0, 0, 3, 3) == pts
    assert range_query(pts, 5, 5, 9, 9) == []


@pytest.mark.parametrize("box", [
    (0, 0, 15, 15),
    (3, 5, 9, 12),
    (7, 7, 7, 7),
    (0, 10, 4, 15),
    (12, 0, 15, 3),
])
def test_query_sorted_matches_brute_force(grid, box):
    assert query_sorted(grid, *box) == range_query(grid, *box)


def test_query_sorted_empty_box(grid):
    assert query_sorted(grid, 5, 5, 4, 9) == []


def test_z_order_sort_keeps_duplicate_order():
    a = SimpleNamespace(x=1, y=1, tag="a")
    b = SimpleNamespace(x=0, y=0, tag="b")
    c = SimpleNamespace(x=1, y=1, tag="c")
    d = SimpleNamespace(x=1, y=0, tag="d")
    assert [p.tag for p in z_order_sort([a, b, c, d])] == ["b", "d", "a", "c"]


def test_binary_string():
    assert to_binary_string(5) == "0000000000000101"
    assert to_binary_string(5, bits=4) == "0101"
    assert to_binary_string(0, bits=1) == "0"
    assert to_binary_string(0xFFFFFFFF, bits=32) == "1" * 32


def test_binary_string_too_wide():
    """Codes wider than `bits` are rejected, never truncated."""
    with pytest.raises(InvalidArgumentError):
        to_binary_string(16, bits=4)
    with pytest.raises(InvalidArgumentError):
        to_binary_string(1, bits=0)


def test_query_sorted_clamps_wide_box(grid):
    """Bounds past 65535 behave like the brute-force filter."""
    assert query_sorted(grid, 0, 0, 65536, 65536) == range_query(grid, 0, 0, 65536, 65536)
    assert len(query_sorted(grid, 3, 4, 100000, 70000)) == 13 * 12
    assert query_sorted(grid, 70000, 0, 80000, 5) == []
