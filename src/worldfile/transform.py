"""
transform.py

The world file model: six affine coefficients relating raster pixel
coordinates to planar world coordinates, plus the forward and inverse point
mappings.

Public objects:
- `WorldFile` : immutable value object
- `WorldFile.image_to_world((px, py))` -> (wx, wy)
- `WorldFile.world_to_image((wx, wy))` -> (px, py)

Pixel coordinates are continuous. `(10.0, 2.0)` is the top-left corner of
pixel (10, 2) and `(10.5, 2.5)` is its centre. No spatial reference is
attached to the transform.
"""
from dataclasses import dataclass
from typing import Sequence, Tuple
import math
import logging

from affine import Affine

from worldfile.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def _as_point(point: Sequence[float]) -> Point:
    x, y = point
    return float(x), float(y)


@dataclass(frozen=True)
class WorldFile:
    """Six-parameter affine transform of a world file.

    Forward mapping::

        wx = x_scale * px + x_skew  * py + x_coord
        wy = y_skew  * px + y_scale * py + y_coord

    Both scales must be non-zero and every coefficient finite; a
    `ValidationError` is raised otherwise. The determinant is only checked
    when an inverse mapping is requested, since skew terms can make a
    transform with valid scales singular.
    """

    x_scale: float
    y_scale: float
    x_skew: float = 0.0
    y_skew: float = 0.0
    x_coord: float = 0.0
    y_coord: float = 0.0

    def __post_init__(self):
        for name in ('x_scale', 'y_scale', 'x_skew', 'y_skew', 'x_coord', 'y_coord'):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError) as e:
                raise ValidationError(f'{name} is not a number: {value!r}', field=name) from e
            if not math.isfinite(value):
                raise ValidationError(f'{name} must be finite, got {value!r}', field=name)
            # frozen dataclass: bypass __setattr__ to store the coerced value
            object.__setattr__(self, name, value)
        if self.x_scale == 0.0:
            raise ValidationError('x_scale must be non-zero', field='x_scale')
        if self.y_scale == 0.0:
            raise ValidationError('y_scale must be non-zero', field='y_scale')

    # ── construction helpers ──────────────────────────────────────────────
    @classmethod
    def from_affine(cls, transform: Affine) -> 'WorldFile':
        """Build from an `affine.Affine` (a, b, c, d, e, f layout)."""
        return cls(
            x_scale=transform.a,
            y_scale=transform.e,
            x_skew=transform.b,
            y_skew=transform.d,
            x_coord=transform.c,
            y_coord=transform.f,
        )

    @classmethod
    def from_text(cls, text, strict: bool = False) -> 'WorldFile':
        from worldfile import io as wf_io
        return wf_io.parse(text, strict=strict)

    @classmethod
    def from_stream(cls, stream, strict: bool = False) -> 'WorldFile':
        from worldfile import io as wf_io
        return wf_io.read_from_stream(stream, strict=strict)

    @classmethod
    def from_path(cls, path, strict: bool = False) -> 'WorldFile':
        from worldfile import io as wf_io
        return wf_io.read_from_path(path, strict=strict)

    # ── serialization ─────────────────────────────────────────────────────
    def to_text(self) -> str:
        from worldfile import io as wf_io
        return wf_io.to_text(self)

    def write_to_stream(self, stream) -> None:
        from worldfile import io as wf_io
        wf_io.write_to_stream(self, stream)

    def write_to_path(self, path) -> None:
        from worldfile import io as wf_io
        wf_io.write_to_path(self, path)

    def __str__(self):
        return self.to_text()

    def to_affine(self) -> Affine:
        """Return the equivalent `affine.Affine`.

        Both reference pixel (0, 0) at its top-left corner, so no half-pixel
        shift is applied.
        """
        return Affine(self.x_scale, self.x_skew, self.x_coord,
                      self.y_skew, self.y_scale, self.y_coord)

    # ── mapping ───────────────────────────────────────────────────────────
    @property
    def determinant(self) -> float:
        return self.x_scale * self.y_scale - self.x_skew * self.y_skew

    @property
    def is_invertible(self) -> bool:
        return self.determinant != 0.0

    def image_to_world(self, point: Sequence[float]) -> Point:
        """Convert image (pixel) coordinates to world coordinates."""
        x, y = _as_point(point)
        return (
            self.x_scale * x + self.x_skew * y + self.x_coord,
            self.y_skew * x + self.y_scale * y + self.y_coord,
        )

    def world_to_image(self, point: Sequence[float]) -> Point:
        """Convert world coordinates to image (pixel) coordinates.

        Solves the forward mapping with Cramer's rule. Raises `DomainError`
        when the transform is singular.
        """
        x, y = _as_point(point)

        a = self.x_scale
        b = self.x_skew
        c = self.x_coord
        d = self.y_skew
        e = self.y_scale
        f = self.y_coord

        det = a * e - b * d
        if det == 0.0:
            logger.debug('singular world file %r, refusing inverse of %r', self, (x, y))
            raise DomainError('transform is singular (determinant is 0), no inverse mapping exists',
                              determinant=det)

        return (
            (x * e - b * y + b * f - c * e) / det,
            (-x * d + a * y - a * f + c * d) / det,
        )
