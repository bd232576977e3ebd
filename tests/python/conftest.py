"""
Pytest configuration and shared fixtures for mmsparse tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import mmsparse


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Sample Files
# =============================================================================

GENERAL_REAL = """\
%%MatrixMarket matrix coordinate real general
3 3 2
1 1 5.0
2 3 7.0
"""

SYMMETRIC_REAL = """\
%%MatrixMarket matrix coordinate real symmetric
3 3 1
1 2 4.0
"""

# 4x5 with comments, an empty row (row 3) and empty trailing columns
GENERAL_COMMENTED = """\
%%MatrixMarket matrix coordinate real general
% generated for tests
% second comment
4 5 5
4 1 6.5
1 3 1.5
2 2 -2.0
1 1 3.0
4 2 1e-3
"""

# Lower triangle of a 4x4 symmetric matrix: 3 diagonal + 2 off-diagonal
SYMMETRIC_LOWER = """\
%%MatrixMarket matrix coordinate real symmetric
4 4 5
1 1 1.0
2 1 2.0
3 3 3.0
4 2 4.0
4 4 5.0
"""

PATTERN_GENERAL = """\
%%MatrixMarket matrix coordinate pattern general
3 4 3
2 3
1 1
3 4
"""

INTEGER_GENERAL = """\
%%MatrixMarket matrix coordinate integer general
2 2 3
1 2 7
2 1 -3
2 2 12
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(autouse=True)
def reset_config():
    """Isolate tests from global precision changes."""
    mmsparse.config.reset()
    yield
    mmsparse.config.reset()


@pytest.fixture
def write_mtx(tmp_path):
    """Factory writing MatrixMarket text to a temporary file.

    Usage: path = write_mtx(text) or write_mtx(text, name="a.mtx")
    """
    counter = {"n": 0}

    def _write(text, name=None):
        if name is None:
            counter["n"] += 1
            name = f"matrix_{counter['n']}.mtx"
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def general_path(write_mtx):
    return write_mtx(GENERAL_REAL, "general.mtx")


@pytest.fixture
def symmetric_path(write_mtx):
    return write_mtx(SYMMETRIC_REAL, "symmetric.mtx")


@pytest.fixture
def commented_path(write_mtx):
    return write_mtx(GENERAL_COMMENTED, "commented.mtx")


@pytest.fixture
def symmetric_lower_path(write_mtx):
    return write_mtx(SYMMETRIC_LOWER, "symmetric_lower.mtx")


@pytest.fixture
def pattern_path(write_mtx):
    return write_mtx(PATTERN_GENERAL, "pattern.mtx")


@pytest.fixture
def integer_path(write_mtx):
    return write_mtx(INTEGER_GENERAL, "integer.mtx")


@pytest.fixture
def dense_commented():
    """Dense equivalent of GENERAL_COMMENTED."""
    dense = np.zeros((4, 5))
    dense[3, 0] = 6.5
    dense[0, 2] = 1.5
    dense[1, 1] = -2.0
    dense[0, 0] = 3.0
    dense[3, 1] = 1e-3
    return dense


# =============================================================================
# Helper Functions
# =============================================================================

def mtx_text(banner_tail, size_line, data_lines):
    """Assemble MatrixMarket text from parts."""
    lines = [f"%%MatrixMarket matrix coordinate {banner_tail}", size_line]
    lines.extend(data_lines)
    return "\n".join(lines) + "\n"


def assert_compressed_invariants(mat):
    """Assert offsets/index/value layout invariants of a compressed matrix."""
    offsets = np.asarray(mat.major_offsets, dtype=np.int64)
    assert len(offsets) == mat.major_dim + 1
    assert offsets[0] == 0
    assert offsets[-1] == mat.num_nonzeros
    assert np.all(np.diff(offsets) >= 0)
    assert len(mat.minor_indices) == mat.num_nonzeros
    assert len(mat.values) == mat.num_nonzeros
    for m in range(mat.major_dim):
        seg = np.asarray(mat.minor_indices[offsets[m]:offsets[m + 1]], dtype=np.int64)
        assert np.all(np.diff(seg) >= 0)
