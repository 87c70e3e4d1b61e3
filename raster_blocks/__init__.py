"""

spatial
-------

.. automodule:: raster_blocks.spatial.blockrect
   :members:

"""
import numpy as np


def default_index_dtype():
    """
    :return: The default dtype for row/column index arrays
    """
    return np.int64


import raster_blocks.spatial as spatial
from raster_blocks.spatial import *
