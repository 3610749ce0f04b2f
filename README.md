# minirt

A compact ray tracer. It renders scenes made of spheres, planes, finite
cylinders and double cones, lit by an ambient term and any number of point
lights, with hard shadows. An optional "bonus" mode adds a checkerboard
texture and a procedural bump map for materials that ask for them, and
Blinn–Phong specular highlights on every lit surface. Rendered images can be
encoded as binary PPM.

The package also carries a small printf-style formatter supporting
`%c %s %p %d %i %u %x %X %%` with the `- 0 . # + space` flags, width,
precision and `*`, a levelled logger built on it, and a buffered line reader.

## Installing

```
pip install .
```

The package has no runtime dependencies. For the tests:

```
pip install ".[test]"
pytest
```

## Rendering a scene

```python
from minirt.vector import Vec3
from minirt.scene import Scene, Camera, Light, Sphere, Plane, Material, Color
from minirt.render import Image, render

scene = Scene(
    ambient=0.2,
    ambient_color=Color(1.0, 1.0, 1.0),
    camera=Camera(pos=Vec3(0, 1, -5), direction=Vec3(0, 0, 1), fov_deg=70),
    lights=[Light(pos=Vec3(-3, 5, -4), color=Color(1, 1, 1), brightness=0.8)],
    objects=[
        Sphere(center=Vec3(0, 1, 2), radius=1.0,
               material=Material(color=Color(0.9, 0.2, 0.2))),
        Plane(position=Vec3(0, 0, 0), normal=Vec3(0, 1, 0),
              material=Material(color=Color(0.8, 0.8, 0.8), checker=True)),
    ],
)

image = Image(800, 600)
render(scene, image, bonus=True)

with open("scene.ppm", "wb") as out:
    out.write(image.to_ppm())
```

`render` builds the camera basis, casts one ray through each pixel centre,
and paints black wherever nothing is hit. Without `bonus`, only ambient and
diffuse lighting are applied. With `bonus=True`, materials with `checker`
set get a checkerboard on unit tiles of the XZ plane, materials with `bump`
set get a perturbed normal, and every lit point gets a specular highlight
(a material's `specular` and `sp_exp` are used when positive and greater
than 1 respectively; otherwise 0.2 and 16 are used).

`Cone.angle` is in radians; cylinders and cones extend half their `height`
either side of `center` along `axis`, and have no end caps.

Lower-level pieces are usable on their own:

- `Sphere.intersect(ray, tmax)` and its siblings on `Plane`, `Cylinder` and
  `Cone` return a `Hit` (with `t`, `normal`, `material`) or `None`.
- `closest_hit(scene, ray)` and `trace_ray(scene, ray, bonus)` in
  `minirt.render` return the nearest hit and the shaded colour of one ray.
- `shade`, `in_shadow`, `checker`, `bump` and `specular` live in
  `minirt.shading`.
- `Image.put_pixel`, `Image.pixel` and `pack_rgba` work with packed
  32-bit RGBA values (alpha always 255).
- `solve_quadratic` in `minirt.polynomial` returns the roots lying in
  `(1e-4, 1e9]`.

## Formatting and logging

```python
import sys
from minirt.printf.core import sprintf, printf, log_to, LogLevel

sprintf("%-5d|%05x|%.3s", 42, 255, "abcdef")   # '42   |000ff|abc'
printf("%c%c\n", "o", "k")
log_to(LogLevel.WARNING, sys.stderr, "%d rays missed\n", 12,
       threshold=LogLevel.INFO)
```

`printf` and `printf_to(stream, ...)` return the number of characters
written. `log_to` prefixes the message with its level (for example
`[WARNING] `) and writes nothing, returning 0, when the level is below
`threshold`; the default threshold is `LogLevel.NO_LOG`, which silences all
messages. A `None` string prints as `(null)` and a null pointer as `(nil)`.
A malformed or unknown conversion raises `ValueError`; running out of
arguments raises `TypeError`. The pieces behind `sprintf` are
`parse_spec` and `FormatSpec` in `minirt.printf.spec` and `render_spec`
with the `format_*` functions in `minirt.printf.printers`.

## Reading lines

```python
from minirt.linereader import LineReader

with open("scene.rt", "rb") as f:
    for line in LineReader(f):
        ...
```

Text and binary streams both work. Each line keeps its trailing newline;
the final line may lack one. `read_line` returns `None` at end of input.

## What it does not do

There is no scene-file parser: scenes are built in Python from the classes
in `minirt.scene`. There is no window or interactive viewer and no
command-line program; output is the `Image` in memory or its PPM bytes.