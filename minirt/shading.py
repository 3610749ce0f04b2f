"""Surface shading: ambient, diffuse and optional specular, checker and bump effects."""

from __future__ import annotations

import math

from .scene import Color, Material, Scene
from .vector import EPS, Ray, Vec3

_BUMP_AMPLITUDE = 0.25
_CHECKER_DARKEN = 0.2
_DEFAULT_SPECULAR = 0.2
_DEFAULT_SHININESS = 16.0
_SHADOW_BIAS = EPS * 8.0


def _noise(x: float, y: float) -> float:
    return math.sin(x * 2.3) * math.cos(y * 1.7) * 0.5 + 0.5


def checker(surface_pos: Vec3, base_color: Color) -> Color:
    """Checkerboard on unit tiles of the XZ plane: odd tiles keep the colour, even ones darken."""
    tile_u = math.floor(surface_pos.x)
    tile_v = math.floor(surface_pos.z)
    if (tile_u + tile_v) & 1:
        return base_color
    return base_color * _CHECKER_DARKEN


def bump(surface_normal: Vec3, surface_pos: Vec3) -> Vec3:
    """Perturb a normal with a smooth procedural noise pattern."""
    tangent_u = surface_normal.cross(Vec3(0.0, 1.0, 0.0)).normalized()
    tangent_v = surface_normal.cross(tangent_u)
    noise = _noise(surface_pos.x * 0.5, surface_pos.z * 0.5)
    offset = (tangent_u * ((noise - 0.5) * _BUMP_AMPLITUDE)
              + tangent_v * ((0.5 - noise) * _BUMP_AMPLITUDE))
    return (surface_normal + offset).normalized()


def specular(normal: Vec3, to_light: Vec3, view_dir: Vec3, material: Material) -> Color:
    """Blinn-Phong highlight as a grey colour."""
    half_vec = (to_light + view_dir).normalized()
    n_dot_h = max(normal.dot(half_vec), 0.0)
    exponent = _DEFAULT_SHININESS if material.sp_exp <= 1 else material.sp_exp
    strength = _DEFAULT_SPECULAR if material.specular <= 0 else material.specular
    intensity = n_dot_h ** exponent * strength
    return Color(intensity, intensity, intensity)


def hit_any(scene: Scene, ray: Ray, tmax: float) -> bool:
    """True if the ray meets any object within (EPS, tmax]."""
    return any(obj.intersect(ray, tmax) is not None for obj in scene.objects)


def in_shadow(scene: Scene, point: Vec3, light_dir: Vec3, light_dist: float) -> bool:
    """True if something lies between ``point`` and a light ``light_dist`` away."""
    shadow_ray = Ray(point + light_dir * _SHADOW_BIAS, light_dir)
    return hit_any(scene, shadow_ray, light_dist - EPS)


def shade(
    scene: Scene,
    hit_pos: Vec3,
    surface_normal: Vec3,
    material: Material,
    view_dir: Vec3,
    bonus: bool = False,
) -> Color:
    """Colour of a surface point lit by the scene's ambient and point lights."""
    shaded = scene.ambient_color * scene.ambient
    base_color = material.color
    if bonus:
        if material.checker:
            base_color = checker(hit_pos, base_color)
        if material.bump:
            surface_normal = bump(surface_normal, hit_pos)

    for light in scene.lights:
        to_light = light.pos - hit_pos
        light_dist = to_light.length()
        to_light = to_light / light_dist
        if in_shadow(scene, hit_pos, to_light, light_dist):
            continue
        n_dot_l = surface_normal.dot(to_light)
        if n_dot_l <= 0.0:
            continue
        shaded = shaded + base_color.modulate(light.color) * (n_dot_l * light.brightness)
        if bonus:
            spec = specular(surface_normal, to_light, view_dir, material)
            shaded = shaded + light.color.modulate(spec) * light.brightness
    return shaded.clamped()