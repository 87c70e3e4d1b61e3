__all__ = ['iBlock', 'iPoint', 'BlockRect', 'BlockLike', 'IndexLike']

from raster_blocks.spatial.typing import BlockLike, IndexLike
import raster_blocks.spatial.typing as typing
from raster_blocks.spatial.indicies import iBlock, iPoint
import raster_blocks.spatial.indicies as indicies
from raster_blocks.spatial.blockrect import BlockRect
import raster_blocks.spatial.blockrect as blockrect
