"""Scanline-parallel render driver.

The image is split into scanlines. Each scanline is an independent job:
it owns a random generator seeded from ``(seed, row)``, traces every
sample of every pixel in the row and returns tone-mapped 8-bit pixels.
Jobs share nothing mutable, so they can run in any order on any number
of worker processes and the assembled image is always the same.

This module provides:
- RenderSettings: validated image and sampling configuration
- render_scanline: render one row in the calling process
- tone_map / tone_map_array: averaged linear color to 8-bit gamma-2 values
- ScanlineRenderer: serial or process-pool rendering with progress reporting
- render_image: one-call convenience wrapper

Example:
    >>> from raytracer.core.renderer import RenderSettings, ScanlineRenderer
    >>> from raytracer.scene.presets import create_default_scene
    >>> scene, camera = create_default_scene()
    >>> renderer = ScanlineRenderer(RenderSettings(width=64, height=36, samples_per_pixel=4))
    >>> image = renderer.render(scene, camera)
    >>> image.shape
    (36, 64, 3)
"""

from __future__ import annotations

import logging
import math
import os
import time
from collections.abc import Callable, Generator
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
import numpy.typing as npt

from raytracer.camera.thin_lens import Camera, ThinLensCamera, setup_camera
from raytracer.core.integrator import MAX_DEPTH, ray_color
from raytracer.core.vector import Color, random_double
from raytracer.preview.export import save_image

if TYPE_CHECKING:
    from raytracer.scene.intersection import Scene

logger = logging.getLogger(__name__)

# Callback receives (completed_rows, total_rows)
ProgressCallback = Callable[[int, int], None]

# Largest tone-mapped channel value before scaling to 8 bits
MAX_INTENSITY = 0.999


# =============================================================================
# Settings
# =============================================================================


@dataclass
class RenderSettings:
    """Image size and sampling configuration.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        samples_per_pixel: Camera rays averaged per pixel.
        max_depth: Maximum bounces per path. Zero renders black.
        seed: Base seed; row ``j`` draws from a generator seeded with (seed, j).
        workers: Worker processes. None uses every CPU; 1 renders in-process.
    """

    width: int
    height: int
    samples_per_pixel: int = 100
    max_depth: int = MAX_DEPTH
    seed: int = 0
    workers: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image size {self.width}x{self.height} must be positive in both dimensions"
            )
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel = {self.samples_per_pixel} must be positive")
        if self.max_depth < 0:
            raise ValueError(f"max_depth = {self.max_depth} must be non-negative")
        if self.seed < 0:
            raise ValueError(f"seed = {self.seed} must be non-negative")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers = {self.workers} must be positive")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def resolve_workers(self) -> int:
        """Number of processes to use, never more than there are rows."""
        workers = self.workers if self.workers is not None else (os.cpu_count() or 1)
        return max(1, min(workers, self.height))


# =============================================================================
# Per-Row Rendering
# =============================================================================


class ScanlineResult(NamedTuple):
    """The rendered pixels of one scanline.

    Attributes:
        row: Scanline index, 0 being the bottom of the image.
        pixels: (width, 3) uint8 array, left to right.
    """

    row: int
    pixels: npt.NDArray[np.uint8]


def make_row_rng(row: int, seed: int = 0) -> np.random.Generator:
    """Create the random generator owned by one scanline.

    The same (row, seed) pair always gives the same sequence, independent
    of which process renders the row or when.
    """
    return np.random.default_rng((seed, row))


def tone_map(color_sum: Color, samples: int) -> tuple[int, int, int]:
    """Convert a sum of samples into an 8-bit gamma-2 RGB triple.

    Args:
        color_sum: Sum of the linear radiance of all samples.
        samples: Number of samples in the sum.

    Returns:
        Integers in [0, 255].
    """
    channels = []
    for c in color_sum:
        c = math.sqrt(max(c / samples, 0.0))
        c = min(max(c, 0.0), MAX_INTENSITY)
        channels.append(int(256 * c))
    r, g, b = channels
    return r, g, b


def tone_map_array(
    color_sums: npt.NDArray[np.float64],
    samples: int,
) -> npt.NDArray[np.uint8]:
    """Vectorized tone_map over a buffer of color sums (last axis RGB)."""
    values = np.sqrt(np.maximum(color_sums / samples, 0.0))
    values = np.clip(values, 0.0, MAX_INTENSITY)
    return (256.0 * values).astype(np.uint8)


def render_scanline(
    row: int,
    scene: Scene,
    camera: Camera,
    settings: RenderSettings,
) -> ScanlineResult:
    """Render one scanline.

    Every sample jitters the ray inside the pixel footprint:
    ``s = (i + rand) / width`` and ``t = (row + rand) / height``.

    Args:
        row: Scanline index, 0 being the bottom of the image.
        scene: The scene to render.
        camera: The prepared camera.
        settings: Image size and sampling configuration.

    Returns:
        The tone-mapped pixels of the row.
    """
    rng = make_row_rng(row, settings.seed)
    width = settings.width
    height = settings.height
    sums = np.zeros((width, 3), dtype=np.float64)

    for i in range(width):
        pixel = Color.zero()
        for _ in range(settings.samples_per_pixel):
            s = (i + random_double(rng)) / width
            t = (row + random_double(rng)) / height
            ray = camera.get_ray(s, t, rng)
            pixel = pixel + ray_color(ray, scene, settings.max_depth, rng)
        sums[i] = pixel.to_tuple()

    return ScanlineResult(row, tone_map_array(sums, settings.samples_per_pixel))


# =============================================================================
# Worker Process State
# =============================================================================

# Set once per worker process by the pool initializer
_worker_state: dict[str, object] = {}


def _init_worker(scene: Scene, camera: Camera, settings: RenderSettings) -> None:
    _worker_state["scene"] = scene
    _worker_state["camera"] = camera
    _worker_state["settings"] = settings


def _render_row_in_worker(row: int) -> ScanlineResult:
    return render_scanline(
        row,
        _worker_state["scene"],  # type: ignore[arg-type]
        _worker_state["camera"],  # type: ignore[arg-type]
        _worker_state["settings"],  # type: ignore[arg-type]
    )


# =============================================================================
# Scanline Renderer
# =============================================================================


class ScanlineRenderer:
    """Renders whole images scanline by scanline.

    Rows are rendered in-process when one worker is requested, otherwise on
    a process pool. Either way the result is identical for the same
    settings, and the stored image is ordered top row first.

    Attributes:
        settings: The render configuration.
    """

    def __init__(self, settings: RenderSettings) -> None:
        """Initialize the renderer.

        Args:
            settings: Image size and sampling configuration.
        """
        self.settings = settings
        self._image: npt.NDArray[np.uint8] | None = None

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.settings.width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.settings.height

    def __repr__(self) -> str:
        return (
            f"ScanlineRenderer({self.width}x{self.height}, "
            f"spp={self.settings.samples_per_pixel}, depth={self.settings.max_depth})"
        )

    def render(
        self,
        scene: Scene,
        camera: Camera | ThinLensCamera,
        callback: ProgressCallback | None = None,
    ) -> npt.NDArray[np.uint8]:
        """Render the full image.

        Args:
            scene: The scene to render.
            camera: A prepared Camera, or a ThinLensCamera configuration.
            callback: Optional function called after each finished row with
                (completed_rows, total_rows).

        Returns:
            The (height, width, 3) uint8 image, top row first.

        Example:
            >>> def progress(done, total):
            ...     print(f"Rows: {done}/{total}")
            >>> image = renderer.render(scene, camera, callback=progress)
        """
        for completed, total in self.render_progressive(scene, camera):
            if callback is not None:
                callback(completed, total)
        return self.get_image_uint8()

    def render_progressive(
        self,
        scene: Scene,
        camera: Camera | ThinLensCamera,
    ) -> Generator[tuple[int, int], None, None]:
        """Render the image, yielding progress after each finished row.

        This is a generator-based alternative to render() with callbacks.
        Rows may finish in any order; the image is complete once the
        generator is exhausted.

        Yields:
            Tuple of (completed_rows, total_rows).
        """
        if isinstance(camera, ThinLensCamera):
            camera = setup_camera(camera)

        settings = self.settings
        total = settings.height
        workers = settings.resolve_workers()
        image = np.zeros((settings.height, settings.width, 3), dtype=np.uint8)
        self._image = None

        logger.info(
            "Rendering %dx%d, %d spp, max depth %d, %d worker(s)",
            settings.width,
            settings.height,
            settings.samples_per_pixel,
            settings.max_depth,
            workers,
        )
        start = time.perf_counter()

        completed = 0
        for result in self._iter_scanlines(scene, camera, workers):
            # Top scanline goes first in the image
            image[total - 1 - result.row] = result.pixels
            completed += 1
            logger.debug("Scanline %d done (%d/%d)", result.row, completed, total)
            yield (completed, total)

        self._image = image
        logger.info("Rendered %d scanlines in %.2fs", total, time.perf_counter() - start)

    def _iter_scanlines(
        self,
        scene: Scene,
        camera: Camera,
        workers: int,
    ) -> Generator[ScanlineResult, None, None]:
        rows = range(self.height - 1, -1, -1)
        if workers == 1:
            for row in rows:
                yield render_scanline(row, scene, camera, self.settings)
            return

        with ProcessPoolExecutor(
            max_workers=workers,
            initializer=_init_worker,
            initargs=(scene, camera, self.settings),
        ) as executor:
            futures = [executor.submit(_render_row_in_worker, row) for row in rows]
            try:
                for future in as_completed(futures):
                    yield future.result()
            finally:
                executor.shutdown(cancel_futures=True)

    def get_image_uint8(self) -> npt.NDArray[np.uint8]:
        """Get the last rendered image.

        Returns:
            A copy of the (height, width, 3) uint8 image, top row first.

        Raises:
            RuntimeError: If no render has completed yet.
        """
        if self._image is None:
            raise RuntimeError("No image has been rendered yet; call render() first")
        return self._image.copy()

    def save_image(self, path: str | Path) -> None:
        """Save the last rendered image (format chosen by file suffix).

        Raises:
            RuntimeError: If no render has completed yet.
        """
        save_image(self.get_image_uint8(), path)


def render_image(
    scene: Scene,
    camera: Camera | ThinLensCamera,
    settings: RenderSettings,
    callback: ProgressCallback | None = None,
) -> npt.NDArray[np.uint8]:
    """Render a scene in one call.

    Returns:
        The (height, width, 3) uint8 image, top row first.
    """
    return ScanlineRenderer(settings).render(scene, camera, callback)
