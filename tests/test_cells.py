"""
Tests for cells and dot-number notation
"""
import numpy as np
import pytest

from canto_braille.cells import (
    BLANK,
    cell_to_dots,
    cells,
    dot_matrix,
    dots_to_cell,
    from_dot_matrix,
    from_dot_notation,
    is_cell,
    is_six_dot,
    to_dot_notation,
)


class TestDotNumbers:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "cell,dots",
        [
            ("⠏", "1234"),
            ("⠛", "1245"),
            ("⠼", "3456"),
            ("⠿", "123456"),
            ("⠀", "0"),
            ("⡀", "7"),
        ],
    )
    def test_cell_to_dots(self, cell, dots):
        assert cell_to_dots(cell) == dots
        assert dots_to_cell(dots) == cell

    @pytest.mark.unit
    def test_dot_order_does_not_matter(self):
        assert dots_to_cell("4321") == "⠏"

    @pytest.mark.unit
    @pytest.mark.parametrize("dots", ["", "9", "11", "1a", "-"])
    def test_invalid_dots(self, dots):
        with pytest.raises(ValueError):
            dots_to_cell(dots)

    @pytest.mark.unit
    def test_not_a_cell(self):
        with pytest.raises(ValueError):
            cell_to_dots("a")

    @pytest.mark.unit
    def test_cell_ranges(self):
        assert is_cell("⠀") and is_six_dot("⠀")
        assert is_cell("⣿") and not is_six_dot("⣿")
        assert not is_cell("a")
        assert not is_cell("⠏⠃")

    @pytest.mark.unit
    def test_cells_sequence(self):
        assert cells("6-2356") == "⠠⠶"
        assert cells("2356-3-0") == "⠶⠄⠀"


class TestDotNotation:
    @pytest.mark.unit
    def test_to_dot_notation(self):
        assert to_dot_notation("⠏⠃⠀⠏⠃") == "1234-12-0-1234-12"
        assert to_dot_notation("⠏⠃ x") == "1234-12 x"
        assert to_dot_notation("") == ""

    @pytest.mark.unit
    def test_from_dot_notation(self):
        assert from_dot_notation("1234-12 1234-12") == "⠏⠃" + BLANK + "⠏⠃"
        assert from_dot_notation("1234-12-0-1234-12") == "⠏⠃⠀⠏⠃"
        assert from_dot_notation("1345-125\n125-1236") == "⠝⠓\n⠓⠧"

    @pytest.mark.unit
    def test_from_dot_notation_rejects_text(self):
        with pytest.raises(ValueError):
            from_dot_notation("12x")


class TestDotMatrix:
    @pytest.mark.unit
    def test_dot_matrix(self):
        matrix = dot_matrix("⠏⠃")

        assert matrix.shape == (2, 6)
        assert matrix.dtype == np.bool_
        assert matrix[0].tolist() == [True, True, True, True, False, False]
        assert matrix[1].tolist() == [True, True, False, False, False, False]

    @pytest.mark.unit
    def test_all_six_dot_cells(self):
        text = "".join(chr(0x2800 + pattern) for pattern in range(64))
        matrix = dot_matrix(text)

        assert matrix.shape == (64, 6)
        assert from_dot_matrix(matrix) == text

    @pytest.mark.unit
    def test_empty(self):
        assert dot_matrix("").shape == (0, 6)
        assert from_dot_matrix(np.zeros((0, 6), dtype=bool)) == ""

    @pytest.mark.unit
    def test_eight_dot_cell_rejected(self):
        with pytest.raises(ValueError):
            dot_matrix("⡀")

    @pytest.mark.unit
    def test_bad_shape(self):
        with pytest.raises(ValueError):
            from_dot_matrix(np.ones((2, 8), dtype=bool))
