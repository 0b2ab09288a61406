#!/usr/bin/env python3
"""Render a preset scene to an image file.

This script renders one of the preset scenes with the scanline renderer,
spreading scanlines over worker processes, and writes the result as PPM
or any format Pillow supports (chosen by the output suffix).

Usage:
    python -m examples.render_scene [options]

Options:
    --scene NAME        Preset scene: default, random, showcase (default: default)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 225)
    --samples SAMPLES   Number of samples per pixel (default: 100)
    --max-depth DEPTH   Maximum bounces per path (default: 50)
    --workers N         Worker processes (default: all CPUs)
    --seed SEED         Seed for sampling and the random scene (default: 0)
    --output OUTPUT     Output file path (default: render.png)
    --quiet             Only log warnings and errors
    --verbose           Log every finished scanline

Example:
    python -m examples.render_scene --scene random --width 320 --height 180 --samples 20
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from raytracer.core.renderer import RenderSettings, ScanlineRenderer
from raytracer.scene.presets import SCENE_NAMES, create_scene

logger = logging.getLogger("render_scene")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a preset scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=SCENE_NAMES,
        default="default",
        help="Preset scene to render (default: default)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=225,
        help="Image height in pixels (default: 225)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Number of samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=50,
        help="Maximum bounces per path (default: 50)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes; 1 renders in-process (default: all CPUs)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for sampling and the random scene (default: 0)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path, .ppm or any Pillow format (default: render.png)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    verbosity.add_argument(
        "--verbose",
        action="store_true",
        help="Log every finished scanline",
    )
    return parser.parse_args(argv)


def render_scene(
    scene_name: str = "default",
    settings: RenderSettings | None = None,
    output_path: str = "render.png",
) -> Path:
    """Render a preset scene and save it to file.

    Args:
        scene_name: One of the preset scene names.
        settings: Render configuration. Defaults to 400x225 at 100 spp.
        output_path: Output file path.

    Returns:
        Path to the saved image file.
    """
    if settings is None:
        settings = RenderSettings(width=400, height=225)

    logger.info("Creating %s scene", scene_name)
    scene, camera = create_scene(scene_name, seed=settings.seed, aspect_ratio=settings.aspect_ratio)
    logger.info("Scene has %d primitives", len(scene))

    renderer = ScanlineRenderer(settings)
    start_time = time.time()
    next_report = 0.0

    def progress_callback(completed: int, total: int) -> None:
        nonlocal next_report
        fraction = completed / total
        if fraction >= next_report or completed == total:
            elapsed = time.time() - start_time
            logger.info(
                "Progress: %d/%d scanlines (%.0f%%) - %.1fs",
                completed,
                total,
                100 * fraction,
                elapsed,
            )
            next_report = fraction + 0.1

    renderer.render(scene, camera, callback=progress_callback)

    output_file = Path(output_path)
    renderer.save_image(output_file)
    logger.info("Saved to: %s", output_file.absolute())
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.max_depth,
            seed=args.seed,
            workers=args.workers,
        )
        render_scene(args.scene, settings, args.output)
        return 0
    except Exception:
        logger.exception("Render failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
