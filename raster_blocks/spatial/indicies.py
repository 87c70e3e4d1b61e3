from enum import IntEnum


class iBlock(IntEnum):
    RowStart = 0
    ColStart = 1
    Height = 2
    Width = 3


class iPoint(IntEnum):
    Row = 0
    Col = 1
