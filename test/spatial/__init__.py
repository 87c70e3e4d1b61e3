import hypothesis
import hypothesis.strategies
from raster_blocks.spatial import BlockRect


@hypothesis.strategies.composite
def blockrects(draw, positionRange=None, shapeRange=None):
    """Draws a single BlockRect.  Extents may be zero or negative unless shapeRange excludes them"""
    if positionRange is None:
        positionRange = (-1000, 1000)

    if shapeRange is None:
        shapeRange = (-10, 100)

    rowStart = draw(hypothesis.strategies.integers(positionRange[0], positionRange[1]))
    colStart = draw(hypothesis.strategies.integers(positionRange[0], positionRange[1]))
    height = draw(hypothesis.strategies.integers(shapeRange[0], shapeRange[1]))
    width = draw(hypothesis.strategies.integers(shapeRange[0], shapeRange[1]))

    return BlockRect(rowStart, colStart, height, width)


def nondegenerate_blockrects(positionRange=None, maxExtent=100):
    return blockrects(positionRange=positionRange, shapeRange=(1, maxExtent))


@hypothesis.strategies.composite
def degenerate_blockrects(draw, positionRange=(-1000, 1000)):
    """Draws a BlockRect with at least one zero or negative extent"""
    rowStart = draw(hypothesis.strategies.integers(positionRange[0], positionRange[1]))
    colStart = draw(hypothesis.strategies.integers(positionRange[0], positionRange[1]))
    bad_extent = draw(hypothesis.strategies.integers(-10, 0))
    other_extent = draw(hypothesis.strategies.integers(-10, 100))

    if draw(hypothesis.strategies.booleans()):
        return BlockRect(rowStart, colStart, bad_extent, other_extent)

    return BlockRect(rowStart, colStart, other_extent, bad_extent)
