"""Scene description: colours, materials, camera, lights and primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

from .vector import EPS, Ray, Vec3

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour with float channels, nominally in [0, 1]."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __mul__(self, k: float) -> Color:
        return Color(self.red * k, self.green * k, self.blue * k)

    __rmul__ = __mul__

    def modulate(self, other: Color) -> Color:
        """Channel-wise product."""
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def clamped(self) -> Color:
        """Cap every channel at 1."""
        return Color(min(self.red, 1.0), min(self.green, 1.0), min(self.blue, 1.0))


@dataclass(frozen=True)
class Material:
    """Surface properties of a primitive."""

    color: Color = field(default_factory=Color)
    checker: bool = False
    specular: float = 0.0
    sp_exp: float = 0.0
    bump: bool = False


@dataclass(frozen=True)
class Hit:
    """A ray/surface intersection."""

    t: float
    normal: Vec3
    material: Material


@dataclass
class Camera:
    """A pinhole camera; ``build`` derives the right and up vectors."""

    pos: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    fov_deg: float = 70.0
    right: Vec3 = field(default_factory=Vec3)
    up: Vec3 = field(default_factory=Vec3)

    def build(self) -> None:
        """Compute an orthonormal right/up basis from the view direction."""
        world_up = Vec3(0.0, 0.0, 1.0) if abs(self.direction.y) > 0.99 else Vec3(0.0, 1.0, 0.0)
        self.right = self.direction.cross(world_up).normalized()
        self.up = self.right.cross(self.direction).normalized()


@dataclass(frozen=True)
class Light:
    """A point light."""

    pos: Vec3
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    brightness: float = 1.0


def _reject(v: Vec3, axis: Vec3) -> Vec3:
    return v - axis * v.dot(axis)


def _nearest(a: float, b: float, c: float, tmax: float) -> Optional[float]:
    """Pick the near root if it is ahead of the origin, else the far one."""
    disc = b * b - 4 * a * c
    if disc < 0 or a == 0:
        return None
    sqrt_disc = math.sqrt(disc)
    t = (-b - sqrt_disc) / (2.0 * a)
    if t < EPS:
        t = (-b + sqrt_disc) / (2.0 * a)
    if t < EPS or t > tmax:
        return None
    return t


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray, tmax: float) -> Optional[Hit]:
        """Nearest hit in (EPS, tmax], or None."""
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        t = _nearest(a, b, c, tmax)
        if t is None:
            return None
        normal = (ray.at(t) - self.center).normalized()
        return Hit(t, normal, self.material)


@dataclass(frozen=True)
class Plane:
    position: Vec3
    normal: Vec3
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray, tmax: float) -> Optional[Hit]:
        """Hit in (EPS, tmax], or None if parallel or out of range."""
        denom = self.normal.dot(ray.direction)
        if abs(denom) < EPS:
            return None
        t = (self.position - ray.origin).dot(self.normal) / denom
        if t < EPS or t > tmax:
            return None
        return Hit(t, self.normal, self.material)


@dataclass(frozen=True)
class Cylinder:
    center: Vec3
    axis: Vec3
    radius: float
    height: float
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray, tmax: float) -> Optional[Hit]:
        """Hit on the finite open tube, or None."""
        axis = self.axis
        oc = ray.origin - self.center
        rd_perp = _reject(ray.direction, axis)
        oc_perp = _reject(oc, axis)
        a = rd_perp.dot(rd_perp)
        b = 2.0 * rd_perp.dot(oc_perp)
        c = oc_perp.dot(oc_perp) - self.radius * self.radius
        t = _nearest(a, b, c, tmax)
        if t is None:
            return None
        axis_pos = (oc + ray.direction * t).dot(axis)
        half = self.height * 0.5
        if axis_pos < -half or axis_pos > half:
            return None
        normal = _reject(ray.at(t) - self.center, axis).normalized()
        return Hit(t, normal, self.material)


@dataclass(frozen=True)
class Cone:
    """A double cone with its apex at ``center``; ``angle`` is in radians."""

    center: Vec3
    axis: Vec3
    angle: float
    height: float
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray, tmax: float) -> Optional[Hit]:
        """Hit on the cone within half the height either side of the apex."""
        k = math.tan(self.angle)
        k2 = k * k
        axis = self.axis
        oc = ray.origin - self.center
        dv = ray.direction.dot(axis)
        ov = oc.dot(axis)
        rd_perp = _reject(ray.direction, axis)
        oc_perp = _reject(oc, axis)
        a = rd_perp.dot(rd_perp) - k2 * dv * dv
        b = 2.0 * (rd_perp.dot(oc_perp) - k2 * dv * ov)
        c = oc_perp.dot(oc_perp) - k2 * ov * ov
        t = _nearest(a, b, c, tmax)
        if t is None:
            return None
        from_center = ray.at(t) - self.center
        axis_pos = from_center.dot(axis)
        half = self.height * 0.5
        if axis_pos < -half or axis_pos > half:
            return None
        radial = _reject(from_center, axis)
        s = math.sqrt(1.0 + k2)
        normal = (radial - axis * (radial.length() * k / s)).normalized()
        return Hit(t, normal, self.material)


Shape = Union[Sphere, Plane, Cylinder, Cone]


@dataclass
class Scene:
    """Everything needed to render an image."""

    ambient: float = 0.0
    ambient_color: Color = field(default_factory=Color)
    camera: Camera = field(default_factory=Camera)
    lights: list[Light] = field(default_factory=list)
    objects: list[Shape] = field(default_factory=list)