"""Primary-ray tracing and the framebuffer it writes into."""

from __future__ import annotations

import math
from typing import Optional

from .scene import Color, Hit, Scene
from .shading import shade
from .vector import TMAX, Ray

_BLACK = Color(0.0, 0.0, 0.0)


def _to_byte(x: float) -> int:
    x = min(max(x, 0.0), 1.0)
    return int(x * 255.0 + 0.5)


def pack_rgba(color: Color) -> int:
    """Pack a colour into a 32-bit RGBA integer with full alpha."""
    r = _to_byte(color.red)
    g = _to_byte(color.green)
    b = _to_byte(color.blue)
    return (r << 24) | (g << 16) | (b << 8) | 0xFF


class Image:
    """A width x height grid of packed RGBA pixels, initially all zero."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Set a pixel; coordinates outside the image are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = pack_rgba(color)

    def pixel(self, x: int, y: int) -> int:
        """Packed RGBA value at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self._pixels[y * self.width + x]

    def to_ppm(self) -> bytes:
        """Encode the image as binary PPM (P6), dropping alpha."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for value in self._pixels:
            body += bytes(((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF))
        return header + bytes(body)


def closest_hit(scene: Scene, ray: Ray) -> Optional[Hit]:
    """Nearest intersection of the ray with any scene object."""
    best: Optional[Hit] = None
    best_t = TMAX
    for obj in scene.objects:
        hit = obj.intersect(ray, best_t)
        if hit is not None:
            best, best_t = hit, hit.t
    return best


def trace_ray(scene: Scene, ray: Ray, bonus: bool = False) -> Optional[Color]:
    """Shaded colour seen along the ray, or None if it hits nothing."""
    hit = closest_hit(scene, ray)
    if hit is None:
        return None
    point = ray.at(hit.t)
    return shade(scene, point, hit.normal, hit.material, -ray.direction, bonus)


def render(scene: Scene, image: Image, bonus: bool = False) -> Image:
    """Trace one primary ray through every pixel centre and fill the image."""
    camera = scene.camera
    aspect = image.width / image.height
    fov_rad = camera.fov_deg * math.pi / 180.0
    scale = math.tan(fov_rad * 0.5)
    camera.build()
    for y in range(image.height):
        ndc_y = (1.0 - 2.0 * ((y + 0.5) / image.height)) * scale
        for x in range(image.width):
            ndc_x = (2.0 * ((x + 0.5) / image.width) - 1.0) * aspect * scale
            direction = (camera.right * ndc_x + camera.up * ndc_y + camera.direction).normalized()
            color = trace_ray(scene, Ray(camera.pos, direction), bonus)
            image.put_pixel(x, y, _BLACK if color is None else color)
    return image