"""
Tests for the coordinate reader.
"""

import io

import pytest
import numpy as np
from mmsparse.io import read_header, read_coordinates, CoordinateList, LineReader
from mmsparse.error import (
    FormatError,
    MalformedNumberError,
    MMS_ERROR_ILL_SHAPED_LINE,
    MMS_ERROR_OUT_OF_BOUNDS,
    MMS_ERROR_UNEXPECTED_EOF,
)

from conftest import mtx_text, SYMMETRIC_LOWER, PATTERN_GENERAL


def read_all(text, value_dtype=None):
    lines = LineReader(io.StringIO(text))
    header = read_header(lines)
    return header, read_coordinates(lines, header, value_dtype)


class TestReadCoordinates:
    """Test entry accumulation."""

    def test_general_entries_in_arrival_order(self):
        """Test 1-indexed lines become 0-indexed entries in file order."""
        _, coords = read_all(mtx_text("real general", "3 3 2", ["2 3 7.0", "1 1 5.0"]))
        assert len(coords) == 2
        assert coords.rows.tolist() == [1, 0]
        assert coords.cols.tolist() == [2, 0]
        assert coords.values.tolist() == [7.0, 5.0]

    def test_symmetric_expansion(self):
        """Test off-diagonal entries are mirrored, diagonal entries are not."""
        header, coords = read_all(SYMMETRIC_LOWER)
        assert header.num_nonzeros == 5
        # 3 diagonal + 2 * 2 off-diagonal
        assert len(coords) == 7
        triples = list(zip(coords.rows.tolist(), coords.cols.tolist(), coords.values.tolist()))
        assert triples == [
            (0, 0, 1.0),
            (1, 0, 2.0), (0, 1, 2.0),
            (2, 2, 3.0),
            (3, 1, 4.0), (1, 3, 4.0),
            (3, 3, 5.0),
        ]

    def test_pattern_values_are_one(self):
        """Test pattern entries carry the multiplicative identity."""
        _, coords = read_all(PATTERN_GENERAL)
        assert coords.values.tolist() == [1.0, 1.0, 1.0]
        assert coords.rows[0] == 1 and coords.cols[0] == 2

    def test_pattern_integer_dtype(self):
        _, coords = read_all(PATTERN_GENERAL, value_dtype="int32")
        assert coords.values.dtype == np.int32
        assert coords.values.tolist() == [1, 1, 1]

    def test_value_dtype(self):
        _, coords = read_all(mtx_text("real general", "2 2 1", ["1 2 0.5"]), value_dtype="float32")
        assert coords.values.dtype == np.float32

    def test_integer_field_values(self):
        _, coords = read_all(mtx_text("integer general", "2 2 2", ["1 2 7", "2 1 -3"]), value_dtype="int64")
        assert coords.values.dtype == np.int64
        assert coords.values.tolist() == [7, -3]

    def test_duplicates_kept(self):
        """Test repeated coordinates are stored separately."""
        _, coords = read_all(mtx_text("real general", "2 2 2", ["1 1 1.0", "1 1 2.0"]))
        assert len(coords) == 2
        assert coords.values.tolist() == [1.0, 2.0]

    def test_zero_nonzeros(self):
        _, coords = read_all(mtx_text("real general", "4 4 0", []))
        assert len(coords) == 0
        assert coords.rows.dtype == np.intp

    def test_trailing_lines_not_read(self):
        """Test only the declared number of lines is consumed."""
        text = mtx_text("real general", "2 2 1", ["1 1 1.0", "this is not read"])
        _, coords = read_all(text)
        assert len(coords) == 1

    def test_trailing_space_tolerated(self):
        _, coords = read_all(mtx_text("real general", "2 2 1", ["1 2 3.0 "]))
        assert coords.values.tolist() == [3.0]

    def test_last_line_without_newline(self):
        text = "%%MatrixMarket matrix coordinate real general\n2 2 1\n2 2 9.0"
        _, coords = read_all(text)
        assert coords.values.tolist() == [9.0]


class TestReadCoordinatesErrors:
    """Test data line validation."""

    @pytest.mark.parametrize("line", ["1 1", "1 1 1.0 2.0", "1  1 1.0", ""])
    def test_ill_shaped_value_line(self, line):
        with pytest.raises(FormatError) as exc:
            read_all(mtx_text("real general", "2 2 1", [line]))
        assert exc.value.code == MMS_ERROR_ILL_SHAPED_LINE
        assert exc.value.line_number == 3

    @pytest.mark.parametrize("line", ["1", "1 1 1.0"])
    def test_ill_shaped_pattern_line(self, line):
        with pytest.raises(FormatError) as exc:
            read_all(mtx_text("pattern general", "2 2 1", [line]))
        assert exc.value.code == MMS_ERROR_ILL_SHAPED_LINE

    @pytest.mark.parametrize("line", ["0 1 1.0", "4 1 1.0", "1 0 1.0", "1 5 1.0", "-1 1 1.0"])
    def test_out_of_bounds(self, line):
        """Test row/col bounds are checked on the 1-indexed values."""
        with pytest.raises(FormatError) as exc:
            read_all(mtx_text("real general", "3 4 1", [line]))
        assert exc.value.code == MMS_ERROR_OUT_OF_BOUNDS
        assert not isinstance(exc.value, MalformedNumberError)

    def test_row_past_end_in_symmetric_file(self):
        with pytest.raises(FormatError):
            read_all(mtx_text("real symmetric", "3 3 2", ["1 1 1.0", "4 1 1.0"]))

    def test_mirror_outside_non_square_symmetric(self):
        """Test (1, 3) in a 2x3 symmetric file fails because (3, 1) has no row 3."""
        with pytest.raises(FormatError) as exc:
            read_all(mtx_text("real symmetric", "2 3 1", ["1 3 4.0"]))
        assert exc.value.code == MMS_ERROR_OUT_OF_BOUNDS
        assert exc.value.line_number == 3

    def test_mirror_inside_non_square_symmetric(self):
        _, coords = read_all(mtx_text("real symmetric", "2 3 2", ["1 2 4.0", "2 2 1.0"]))
        assert coords.rows.tolist() == [0, 1, 1]
        assert coords.cols.tolist() == [1, 0, 1]

    def test_too_few_lines(self):
        with pytest.raises(FormatError) as exc:
            read_all(mtx_text("real general", "3 3 3", ["1 1 1.0", "2 2 2.0"]))
        assert exc.value.code == MMS_ERROR_UNEXPECTED_EOF
        assert exc.value.line_number == 5

    def test_comment_between_data_lines_rejected(self):
        with pytest.raises(FormatError):
            read_all(mtx_text("real general", "2 2 2", ["1 1 1.0", "% note", "2 2 2.0"]))

    @pytest.mark.parametrize("line", ["a 1 1.0", "1 b 1.0", "1 1 x", "1.5 1 1.0"])
    def test_malformed_numbers(self, line):
        with pytest.raises(MalformedNumberError) as exc:
            read_all(mtx_text("real general", "2 2 1", [line]))
        assert exc.value.line_number == 3

    def test_real_value_into_integer_dtype(self):
        with pytest.raises(MalformedNumberError):
            read_all(mtx_text("real general", "2 2 1", ["1 1 2.5"]), value_dtype="int32")


class TestCoordinateList:
    """Test the COO container."""

    def test_from_triples(self):
        coords = CoordinateList.from_triples([(0, 1, 2.0), (1, 0, 3.0)])
        assert len(coords) == 2
        assert coords.rows.tolist() == [0, 1]
        assert coords.values.dtype == np.float64

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            CoordinateList(np.array([0]), np.array([0, 1]), np.array([1.0]))
