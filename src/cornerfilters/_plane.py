import operator
from typing import Tuple

import numpy
from numpy.typing import ArrayLike, NDArray

from ._errors import PreconditionViolation


class PaddedPlane:
    """Single-channel float32 image with a margin of ``border`` samples on every side.

    Logical coordinate ``(r, c)`` lives at ``buffer[r + border, c + border]``, so
    valid logical rows are ``[-border, height + border)`` and likewise for
    columns. The margin holds garbage until :meth:`extend_borders` is called.
    """

    def __init__(self, height: int, width: int, border: int = 0):
        try:
            height, width, border = (operator.index(n) for n in (height, width, border))
        except TypeError as e:
            raise PreconditionViolation(
                "allocate",
                f"dimensions must be integers, got {height!r}x{width!r} with border {border!r}",
            ) from e
        if height <= 0 or width <= 0:
            raise PreconditionViolation("allocate", f"empty plane {height}x{width}")
        if border < 0:
            raise PreconditionViolation("allocate", f"negative border {border}")
        self.height = height
        self.width = width
        self.border = border
        self.stride = self.width + 2 * self.border
        self.buffer = numpy.empty(
            (self.height + 2 * self.border, self.stride), dtype=numpy.float32
        )

    @classmethod
    def from_array(cls, data: ArrayLike, border: int = 0) -> "PaddedPlane":
        data = numpy.asarray(data)
        if data.ndim != 2:
            raise PreconditionViolation("allocate", f"expected 2D data, got {data.ndim}D")
        plane = cls(*data.shape, border=border)
        plane.interior[...] = data
        return plane

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def interior(self) -> NDArray[numpy.float32]:
        b = self.border
        return self.buffer[b : b + self.height, b : b + self.width]

    def region(self, top: int, bottom: int, left: int, right: int) -> NDArray[numpy.float32]:
        b = self.border
        if not (-b <= top <= bottom <= self.height + b and -b <= left <= right <= self.width + b):
            raise IndexError(
                f"region [{top}:{bottom}, {left}:{right}] outside plane "
                f"{self.height}x{self.width} with border {b}"
            )
        return self.buffer[top + b : bottom + b, left + b : right + b]

    def _index(self, key):
        r, c = key
        b = self.border
        if not (-b <= r < self.height + b and -b <= c < self.width + b):
            raise IndexError(f"({r}, {c}) outside plane {self.height}x{self.width} with border {b}")
        return r + b, c + b

    def __getitem__(self, key):
        return self.buffer[self._index(key)]

    def __setitem__(self, key, value):
        self.buffer[self._index(key)] = value

    def extend_borders(self) -> None:
        """Fill the margin by point-symmetric extension through the edge samples.

        Rows above and below are filled first; the left and right columns are
        then filled for every buffer row, corners included.
        """
        b = self.border
        if b == 0:
            return
        if b >= self.height or b >= self.width:
            raise PreconditionViolation(
                "extend_borders",
                f"border {b} needs a plane larger than {self.height}x{self.width}",
            )
        buf = self.buffer
        k = numpy.arange(1, b + 1)
        cols = slice(b, b + self.width)

        top = b
        buf[top - k, cols] = 2 * buf[top, cols] - buf[top + k, cols]
        bottom = b + self.height - 1
        buf[bottom + k, cols] = 2 * buf[bottom, cols] - buf[bottom - k, cols]

        left = b
        buf[:, left - k] = 2 * buf[:, [left]] - buf[:, left + k]
        right = b + self.width - 1
        buf[:, right + k] = 2 * buf[:, [right]] - buf[:, right - k]

    def __repr__(self):
        return f"PaddedPlane(height={self.height}, width={self.width}, border={self.border})"
