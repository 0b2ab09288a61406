"""Preview module for rendered output.

Components:
    export: PPM and Pillow-based image writers

Example:
    >>> from raytracer.preview import save_image
    >>> save_image(renderer.get_image_uint8(), "output.png")
"""

from raytracer.preview.export import (
    save_image,
    save_png,
    save_ppm,
    write_ppm,
)

__all__ = [
    "write_ppm",
    "save_ppm",
    "save_png",
    "save_image",
]
