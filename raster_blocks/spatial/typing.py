from typing import Sequence
import numpy as np
from numpy.typing import NDArray

"""A type for (row, col) index pairs used for typing"""
IndexLike = NDArray[np.integer] | Sequence[int] | tuple[int, int]

"""A type for (RowStart, ColStart, Height, Width) tuples used for typing"""
BlockLike = NDArray[np.integer] | Sequence[int] | tuple[int, int, int, int]
