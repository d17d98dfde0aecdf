"""
geometry.py

Single-point pixel helpers built on `WorldFile`. Pixel coordinates are
(col, row) = (x, y); integer coordinates address a pixel's top-left corner.

Public functions:
- `pixel_center(world_file, col, row)` -> (wx, wy)
- `pixel_index(world_file, wx, wy)` -> (col, row)
- `image_corners(world_file, width, height)` -> four (wx, wy) corners
"""
from typing import Tuple
import math

from worldfile.transform import WorldFile


def pixel_center(world_file: WorldFile, col, row) -> Tuple[float, float]:
    """World coordinate of the centre of pixel (col, row)."""
    return world_file.image_to_world((col + 0.5, row + 0.5))


def pixel_index(world_file: WorldFile, wx, wy) -> Tuple[int, int]:
    """Integer (col, row) of the pixel containing world point (wx, wy).

    Raises `DomainError` for a singular transform.
    """
    px, py = world_file.world_to_image((wx, wy))
    return int(math.floor(px)), int(math.floor(py))


def image_corners(world_file: WorldFile, width, height):
    """World coordinates of the outer corners of a `width` x `height` image.

    Order: upper-left, upper-right, lower-right, lower-left (pixel space).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f'image size must be positive, got {width}x{height}')
    return [
        world_file.image_to_world((0, 0)),
        world_file.image_to_world((width, 0)),
        world_file.image_to_world((width, height)),
        world_file.image_to_world((0, height)),
    ]
