"""Read, write and use world files for georeferenced images.

A world file is a six-line text sidecar holding the affine transform from
image pixel coordinates to planar world coordinates:

    >>> from worldfile import WorldFile
    >>> w = WorldFile.from_text("32.0\\n0.0\\n0.0\\n-32.0\\n691200.0\\n4576000.0\\n")
    >>> w.image_to_world((171, 343))
    (696672.0, 4565024.0)
    >>> w.world_to_image((696672, 4565024))
    (171.0, 343.0)

World files carry no spatial reference system.
"""

from worldfile.errors import (
    DomainError,
    ParseError,
    ValidationError,
    WorldFileError,
    WorldFileIOError,
)
from worldfile.transform import WorldFile
from worldfile.io import (
    find_world_file,
    parse,
    read_for_image,
    read_from_path,
    read_from_stream,
    to_text,
    world_file_path,
    write_to_path,
    write_to_stream,
)


def image_to_world(world_file, point):
    return world_file.image_to_world(point)


def world_to_image(world_file, point):
    return world_file.world_to_image(point)


__version__ = "0.1.0"

__all__ = [
    'WorldFile',
    'WorldFileError',
    'WorldFileIOError',
    'ParseError',
    'ValidationError',
    'DomainError',
    'parse',
    'to_text',
    'read_from_stream',
    'read_from_path',
    'write_to_stream',
    'write_to_path',
    'image_to_world',
    'world_to_image',
    'world_file_path',
    'find_world_file',
    'read_for_image',
]
