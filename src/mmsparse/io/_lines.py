"""Line source shared by the header parser and the coordinate reader."""

from typing import Optional, TextIO, Union

from ._tokens import strip_newline
from ..error import (
    FormatError,
    MatrixMarketIOError,
    MMS_ERROR_FORMAT_ERROR,
    MMS_ERROR_READ_ERROR,
)

__all__ = ['LineReader', 'as_line_reader']


class LineReader:
    """Reads terminator-stripped lines and counts them.

    ``readline`` returns None at end of file, so a blank line ('') can be
    told apart from EOF. Decoding and read failures surface as mmsparse
    errors carrying the offending line number.
    """

    __slots__ = ('_stream', '_line_number', '_name')

    def __init__(self, stream: TextIO, name: Optional[str] = None):
        self._stream = stream
        self._line_number = 0
        self._name = name if name is not None else getattr(stream, 'name', None)

    @property
    def line_number(self) -> int:
        """Number of the most recently read line (1-based, 0 before any read)."""
        return self._line_number

    @property
    def name(self) -> Optional[str]:
        return self._name

    def readline(self) -> Optional[str]:
        next_number = self._line_number + 1
        try:
            raw = self._stream.readline()
        except UnicodeDecodeError as e:
            raise FormatError(
                f"undecodable text: {e.reason}",
                code=MMS_ERROR_FORMAT_ERROR,
                line_number=next_number,
            ) from e
        except OSError as e:
            raise MatrixMarketIOError(
                f"read failed: {e.strerror or e}",
                code=MMS_ERROR_READ_ERROR,
                filename=self._name,
                errno=e.errno,
            ) from e
        if not raw:
            return None
        self._line_number = next_number
        return strip_newline(raw)


def as_line_reader(stream: Union[TextIO, LineReader]) -> LineReader:
    if isinstance(stream, LineReader):
        return stream
    return LineReader(stream)
