"""

Blocks are represented as (RowStart, ColStart, Height, Width)
Bounds are represented as (RowStart, ColStart, RowEnd, ColEnd), ends are exclusive
Points are represented as (Row, Col)

"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

import raster_blocks
from raster_blocks.spatial.indicies import iBlock, iPoint
from raster_blocks.spatial.typing import BlockLike, IndexLike

logger = logging.getLogger(__name__)


class BlockRect(object):
    """
    An immutable block of rows and columns in a raster grid.  The block covers
    rows [RowStart, RowStart + Height) and columns [ColStart, ColStart + Width).
    """

    __slots__ = ('_block',)

    @property
    def RowStart(self) -> int:
        return self._block[iBlock.RowStart]

    @property
    def ColStart(self) -> int:
        return self._block[iBlock.ColStart]

    @property
    def Height(self) -> int:
        return self._block[iBlock.Height]

    @property
    def Width(self) -> int:
        return self._block[iBlock.Width]

    @property
    def RowEnd(self) -> int:
        """First row past the block"""
        return self.RowStart + self.Height

    @property
    def ColEnd(self) -> int:
        """First column past the block"""
        return self.ColStart + self.Width

    @property
    def Area(self) -> int:
        return self.Height * self.Width

    @property
    def shape(self) -> NDArray[np.integer]:
        """
        The [height, width] of the block
        """
        return np.asarray([self.Height, self.Width], dtype=raster_blocks.default_index_dtype())

    @property
    def IsDegenerate(self) -> bool:
        """True if the block cannot contain any index"""
        return self.Height <= 0 or self.Width <= 0

    def __init__(self, rowStart: int, colStart: int, height: int, width: int):
        """
        Values are stored as passed.  Zero or negative extents are accepted and
        produce a block that contains no indices.
        """
        object.__setattr__(self, '_block', (rowStart, colStart, height, width))

        if height <= 0 or width <= 0:
            logger.debug("Degenerate block created: %r", self)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete {name}")

    def __eq__(self, other: BlockRect | NDArray) -> bool:
        if isinstance(other, BlockRect):
            return self._block == other._block
        elif isinstance(other, np.ndarray):
            return np.array_equal(np.asarray(self._block), other)

        return False

    def __hash__(self):
        return hash(self._block)

    def __getitem__(self, i):
        return self._block.__getitem__(i)

    def __repr__(self):
        return "BlockRect(rowStart={0}, colStart={1}, height={2}, width={3})".format(*self._block)

    def __str__(self):
        return "Rows: [%d, %d) Cols: [%d, %d)" % (self.RowStart, self.RowEnd, self.ColStart, self.ColEnd)

    def contains(self, rowIndex: int, colIndex: int) -> bool:
        """
        :param int rowIndex: Row to test
        :param int colIndex: Column to test
        :return: True if the index falls inside the block.  The upper bound of both axes is exclusive.
        """
        return self.RowStart <= rowIndex < self.RowStart + self.Height and \
            self.ColStart <= colIndex < self.ColStart + self.Width

    def contains_points(self, points: NDArray[np.integer] | IndexLike) -> NDArray[bool]:
        """
        Vectorized version of contains
        :param ndarray points: Nx2 array of (Row, Col) indices
        :return: Boolean array with one entry per point
        """
        points = np.asarray(points)
        if points.ndim == 1:
            points = points.reshape((1, points.size))

        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Expected an Nx2 array of (Row, Col) indices, got shape {points.shape}")

        rows = points[:, iPoint.Row]
        cols = points[:, iPoint.Col]

        return np.logical_and(np.logical_and(self.RowStart <= rows, rows < self.RowStart + self.Height),
                              np.logical_and(self.ColStart <= cols, cols < self.ColStart + self.Width))

    def ToTuple(self) -> tuple[int, int, int, int]:
        return self._block

    def ToArray(self) -> NDArray[np.integer]:
        return np.asarray(self._block, dtype=raster_blocks.default_index_dtype())

    def ToBounds(self) -> tuple[int, int, int, int]:
        """
        :return: (RowStart, ColStart, RowEnd, ColEnd)
        """
        return self.RowStart, self.ColStart, self.RowEnd, self.ColEnd

    def ToSlices(self) -> tuple[slice, slice]:
        """
        :return: (row slice, column slice) to index a 2D array with the block
        """
        return slice(self.RowStart, self.RowEnd), slice(self.ColStart, self.ColEnd)

    @staticmethod
    def CreateFromBounds(bounds: BlockLike) -> BlockRect:
        """
        :param bounds: (RowStart, ColStart, RowEnd, ColEnd)
        """
        if bounds is None:
            raise ValueError("bounds for BlockRect must not be None")

        if len(bounds) != 4:
            raise ValueError(
                "Invalid input to CreateFromBounds.  Expected four elements (RowStart,ColStart,RowEnd,ColEnd): {!r}".format(
                    bounds))

        (rowStart, colStart, rowEnd, colEnd) = bounds
        return BlockRect(rowStart, colStart, rowEnd - rowStart, colEnd - colStart)

    @classmethod
    def PrimitiveToBlockRect(cls, primitive: BlockRect | BlockLike) -> BlockRect:
        """Primitive can be a (RowStart, ColStart, Height, Width) sequence or a BlockRect"""

        if isinstance(primitive, BlockRect):
            return primitive

        if isinstance(primitive, Sequence) or isinstance(primitive, np.ndarray):
            if len(primitive) == 4:
                return BlockRect(*primitive)
            else:
                raise ValueError(f"Sequence should have 4 entries: {primitive!r}")
        else:
            raise ValueError("Unknown primitive type %s" % str(primitive))

    @classmethod
    def Intersect(cls, A: BlockRect | BlockLike, B: BlockRect | BlockLike) -> BlockRect | None:
        """
        :returns: The block covered by both A and B or None if they share no index
        """
        A = cls.PrimitiveToBlockRect(A)
        B = cls.PrimitiveToBlockRect(B)

        if A.IsDegenerate or B.IsDegenerate:
            return None

        rowStart = max(A.RowStart, B.RowStart)
        colStart = max(A.ColStart, B.ColStart)
        rowEnd = min(A.RowEnd, B.RowEnd)
        colEnd = min(A.ColEnd, B.ColEnd)

        if rowStart >= rowEnd or colStart >= colEnd:
            return None

        return cls.CreateFromBounds((rowStart, colStart, rowEnd, colEnd))
