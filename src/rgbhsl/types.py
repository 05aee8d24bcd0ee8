import typing

import pydantic as pc

# Channels are nominally in [0, 1] and are not range checked; out of range
# input yields unspecified numbers, never an error.
Component: typing.TypeAlias = typing.Annotated[
    float, pc.Field(description="Channel intensity, nominally in [0, 1]")
]

Channel16: typing.TypeAlias = typing.Annotated[
    int, pc.Field(description="16-bit channel value, nominally in [0, 65535]")
]

RGBA16: typing.TypeAlias = tuple[Channel16, Channel16, Channel16, Channel16]

RGBA16Adapter = pc.TypeAdapter(RGBA16)

MAX_CHANNEL16 = 0xFFFF
MAX_BYTE = 0xFF
