"""A small ray tracer with geometric primitives, shading, PPM output, a printf-style formatter and a line reader."""

__version__ = "0.1.0"