"""Image export utilities for rendered images.

Rendered images are (height, width, 3) uint8 arrays, top row first, as
returned by ScanlineRenderer.get_image_uint8().

Supported formats:
    - PPM (plain-text P3, written directly)
    - PNG and anything else Pillow can write

Example:
    >>> from raytracer.core.renderer import RenderSettings, render_image
    >>> from raytracer.preview.export import save_image
    >>> from raytracer.scene.presets import create_default_scene
    >>>
    >>> scene, camera = create_default_scene()
    >>> image = render_image(scene, camera, RenderSettings(width=200, height=112))
    >>> save_image(image, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

PPM_MAX_VALUE = 255


def _check_image(image: npt.NDArray[np.uint8]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Image must have shape (height, width, 3), got {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Image must have dtype uint8, got {image.dtype}")


def write_ppm(image: npt.NDArray[np.uint8], stream: TextIO) -> None:
    """Write an image as plain-text PPM (P3).

    The header is ``P3``, ``width height`` and ``255``, followed by one
    ``r g b`` line per pixel in row-major order.

    Args:
        image: (height, width, 3) uint8 image, top row first.
        stream: Text stream to write to.

    Raises:
        ValueError: If the array has the wrong shape or dtype.
    """
    _check_image(image)
    height, width, _ = image.shape
    stream.write(f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n")
    for r, g, b in image.reshape(-1, 3).tolist():
        stream.write(f"{r} {g} {b}\n")


def save_ppm(image: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an image as a plain-text PPM file."""
    with open(filepath, "w", encoding="ascii") as f:
        write_ppm(image, f)


def save_png(image: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an image as an 8-bit RGB file through Pillow (PNG for .png paths).

    Args:
        image: (height, width, 3) uint8 image, top row first.
        filepath: Output file path (should end in .png).

    Raises:
        ValueError: If the array has the wrong shape or dtype.
    """
    _check_image(image)
    pil_image = PILImage.fromarray(image)
    pil_image.save(filepath)


def save_image(image: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an image, choosing the format from the file suffix.

    ``.ppm`` is written as plain-text PPM; any other suffix is handed to
    Pillow, which picks the format (PNG, JPEG, BMP, ...).
    """
    if Path(filepath).suffix.lower() == ".ppm":
        save_ppm(image, filepath)
    else:
        save_png(image, filepath)
