"""
Tests for the CSRMatrix / CSCMatrix containers.
"""

import pytest
import numpy as np
from mmsparse import CSRMatrix, CSCMatrix, CompressedMatrix, SparseFormat
from mmsparse.sparse import CSR, CSC

from conftest import HAS_SCIPY


def make_csr():
    # [[1, 0, 2],
    #  [0, 0, 0],
    #  [3, 4, 0]]
    return CSRMatrix(
        3, 3, 4,
        np.array([0, 2, 2, 4], dtype=np.int64),
        np.array([0, 2, 0, 1], dtype=np.int64),
        np.array([1.0, 2.0, 3.0, 4.0]),
    )


def make_csc():
    # Same matrix as make_csr, column major
    return CSCMatrix(
        3, 3, 4,
        np.array([0, 2, 3, 4], dtype=np.int32),
        np.array([0, 2, 2, 0], dtype=np.int32),
        np.array([1.0, 3.0, 4.0, 2.0], dtype=np.float32),
    )


DENSE = np.array([[1.0, 0.0, 2.0], [0.0, 0.0, 0.0], [3.0, 4.0, 0.0]])


class TestCSRMatrix:
    """Test CSRMatrix properties and access."""

    def test_properties(self):
        csr = make_csr()
        assert csr.format == SparseFormat.CSR
        assert csr.shape == (3, 3)
        assert csr.nnz == 4
        assert csr.major_dim == 3
        assert csr.minor_dim == 3
        assert csr.dtype == np.float64
        assert csr.index_dtype == np.int64
        assert isinstance(csr, CompressedMatrix)

    def test_aliases(self):
        csr = make_csr()
        assert csr.row_offsets is csr.major_offsets
        assert csr.col_indices is csr.minor_indices
        assert csr.indptr is csr.major_offsets
        assert csr.indices is csr.minor_indices
        assert CSR is CSRMatrix

    def test_get_row(self):
        csr = make_csr()
        cols, vals = csr.get_row(2)
        assert cols.tolist() == [0, 1]
        assert vals.tolist() == [3.0, 4.0]
        cols, vals = csr.get_row(1)
        assert len(cols) == 0 and len(vals) == 0

    def test_get_row_negative(self):
        cols, _ = make_csr().get_row(-1)
        assert cols.tolist() == [0, 1]

    def test_get_row_out_of_range(self):
        with pytest.raises(IndexError):
            make_csr().get_row(3)
        with pytest.raises(IndexError):
            make_csr().get_row(-4)

    def test_major_lengths(self):
        assert make_csr().major_lengths().tolist() == [2, 0, 2]

    def test_to_dense(self):
        np.testing.assert_array_equal(make_csr().to_dense(), DENSE)

    def test_to_coo(self):
        rows, cols, vals = make_csr().to_coo()
        assert rows.tolist() == [0, 0, 2, 2]
        assert cols.tolist() == [0, 2, 0, 1]
        assert vals.tolist() == [1.0, 2.0, 3.0, 4.0]


class TestCSCMatrix:
    """Test CSCMatrix properties and access."""

    def test_properties(self):
        csc = make_csc()
        assert csc.format == SparseFormat.CSC
        assert csc.shape == (3, 3)
        assert csc.dtype == np.float32
        assert csc.index_dtype == np.int32

    def test_aliases(self):
        csc = make_csc()
        assert csc.col_offsets is csc.major_offsets
        assert csc.row_indices is csc.minor_indices
        assert csc.indptr is csc.major_offsets
        assert csc.indices is csc.minor_indices
        assert CSC is CSCMatrix

    def test_get_col(self):
        rows, vals = make_csc().get_col(0)
        assert rows.tolist() == [0, 2]
        assert vals.tolist() == [1.0, 3.0]

    def test_to_dense(self):
        np.testing.assert_array_equal(make_csc().to_dense(), DENSE.astype(np.float32))

    def test_to_coo(self):
        rows, cols, _ = make_csc().to_coo()
        assert rows.tolist() == [0, 2, 2, 0]
        assert cols.tolist() == [0, 0, 1, 2]


class TestValidate:
    """Test layout invariant checking."""

    def test_valid(self):
        make_csr().validate()
        make_csc().validate()

    def test_empty(self):
        CSRMatrix(0, 0, 0, np.zeros(1, dtype=np.int64), np.zeros(0, dtype=np.int64), np.zeros(0)).validate()
        CSRMatrix(2, 5, 0, np.zeros(3, dtype=np.int64), np.zeros(0, dtype=np.int64), np.zeros(0)).validate()

    @pytest.mark.parametrize("offsets, indices, message", [
        ([0, 2, 4], [0, 2, 0, 1], "length"),
        ([1, 2, 2, 4], [0, 2, 0, 1], "expected 0"),
        ([0, 2, 2, 3], [0, 2, 0, 1], "expected nnz"),
        ([0, 3, 2, 4], [0, 2, 0, 1], "non-decreasing"),
        ([0, 2, 2, 4], [0, 3, 0, 1], "out of range"),
        ([0, 2, 2, 4], [2, 0, 0, 1], "not sorted"),
    ])
    def test_invalid(self, offsets, indices, message):
        mat = CSRMatrix(3, 3, 4, np.array(offsets), np.array(indices), np.ones(4))
        with pytest.raises(ValueError, match=message):
            mat.validate()

    def test_length_mismatch(self):
        mat = CSRMatrix(3, 3, 4, np.array([0, 2, 2, 4]), np.array([0, 2, 0]), np.ones(4))
        with pytest.raises(ValueError, match="do not match"):
            mat.validate()


class TestDuplicates:
    """Test duplicate entries in conversions."""

    def test_dense_sums_duplicates(self):
        csr = CSRMatrix(
            2, 2, 3,
            np.array([0, 0, 3]),
            np.array([1, 1, 1]),
            np.array([1.0, 2.0, 3.0]),
        )
        csr.validate()
        assert csr.to_dense().tolist() == [[0.0, 0.0], [0.0, 6.0]]


class TestEquality:
    """Test __eq__ and __repr__."""

    def test_equal(self):
        assert make_csr() == make_csr()

    def test_not_equal_values(self):
        other = make_csr()
        other.values[0] = 9.0
        assert make_csr() != other

    def test_format_mismatch(self):
        assert make_csr() != make_csc()

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(make_csr())

    def test_repr(self):
        r = repr(make_csr())
        assert r.startswith("CSRMatrix(")
        assert "shape=(3, 3)" in r
        assert "nnz=4" in r
        assert "index_dtype=int64" in r


@pytest.mark.skipif(not HAS_SCIPY, reason="scipy not available")
class TestScipy:
    """Test scipy.sparse conversion."""

    def test_csr(self, requires_scipy):
        mat = make_csr().to_scipy()
        assert mat.format == "csr"
        np.testing.assert_array_equal(mat.toarray(), DENSE)

    def test_csc(self, requires_scipy):
        mat = make_csc().to_scipy()
        assert mat.format == "csc"
        np.testing.assert_array_equal(mat.toarray(), DENSE)

    def test_decoded_matches_scipy_reader(self, requires_scipy, commented_path):
        import scipy.io
        from mmsparse import decode_as_row_major
        expected = scipy.io.mmread(str(commented_path)).toarray()
        np.testing.assert_allclose(decode_as_row_major(commented_path).to_scipy().toarray(), expected)
