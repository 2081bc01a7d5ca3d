"""Fill count arithmetic shared by every source type."""

import pytest

from padder import Alignment, Fill, WidthError, compute_fill


def test_left_puts_all_fill_right():
    assert compute_fill(3, 9, Alignment.LEFT) == Fill(0, 6)


def test_right_puts_all_fill_left():
    assert compute_fill(8, 11, Alignment.RIGHT) == Fill(3, 0)


def test_center_even_split():
    assert compute_fill(4, 10, Alignment.CENTER) == Fill(3, 3)


def test_center_odd_remainder_goes_right():
    assert compute_fill(4, 9, Alignment.CENTER) == Fill(2, 3)
    assert compute_fill(0, 1, Alignment.CENTER) == Fill(0, 1)


@pytest.mark.parametrize("alignment", list(Alignment))
def test_no_fill_when_source_is_long_enough(alignment):
    assert compute_fill(5, 5, alignment) == Fill(0, 0)
    assert compute_fill(7, 3, alignment) == Fill(0, 0)
    assert compute_fill(0, 0, alignment).total == 0


@pytest.mark.parametrize("alignment", list(Alignment))
def test_fill_plus_source_matches_width(alignment):
    for length in range(0, 13):
        for width in range(0, 13):
            fill = compute_fill(length, width, alignment)
            assert fill.left >= 0 and fill.right >= 0
            assert fill.left + length + fill.right == max(width, length)
            if alignment is Alignment.CENTER:
                assert fill.left <= fill.right <= fill.left + 1


def test_negative_width_rejected():
    with pytest.raises(WidthError) as exc:
        compute_fill(3, -1, Alignment.LEFT)
    assert exc.value.code == "E_WIDTH"
    assert exc.value.context == {"width": -1}
