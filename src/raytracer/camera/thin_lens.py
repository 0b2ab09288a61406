"""Thin-lens camera model for perspective ray generation with defocus blur.

The camera supports:
- Look-at positioning (lookfrom, lookat, vup)
- Vertical field of view specification
- Arbitrary aspect ratios
- A circular aperture for depth of field, focused at focus_dist

The camera builds an orthonormal basis (u, v, w) from the view parameters:
- w: points from lookat toward lookfrom (opposite view direction)
- u: points right in the image plane
- v: points up in the image plane

The viewport is placed on the focus plane, ``focus_dist`` in front of the
lens. Rays start at a random point of the lens disk and pass through the
viewport point, so only geometry on the focus plane is sharp.

Example:
    >>> import numpy as np
    >>> from raytracer.camera.thin_lens import ThinLensCamera, setup_camera
    >>> settings = ThinLensCamera(
    ...     lookfrom=(0.0, 0.0, 3.0),
    ...     lookat=(0.0, 0.0, 0.0),
    ...     vup=(0.0, 1.0, 0.0),
    ...     vfov=60.0,
    ...     aspect_ratio=16.0 / 9.0,
    ... )
    >>> camera = setup_camera(settings)
    >>> ray = camera.get_ray(0.5, 0.5, np.random.default_rng(0))  # image center
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vec3, as_vec3, random_in_unit_disk

# Smallest sine of the angle between vup and the view direction
PARALLEL_TOLERANCE = 1e-12

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass
class ThinLensCamera:
    """Configuration for a thin-lens camera.

    With ``aperture == 0`` the camera behaves as a pinhole and every ray
    starts exactly at lookfrom.

    Attributes:
        lookfrom: Camera position in world space (x, y, z).
        lookat: Point the camera is looking at in world space (x, y, z).
        vup: Up direction vector for camera orientation (typically (0, 1, 0)).
        vfov: Vertical field of view in degrees, in (0, 180).
        aspect_ratio: Width divided by height of the output image.
        aperture: Lens diameter; 0 disables defocus blur.
        focus_dist: Distance from lookfrom to the plane of perfect focus.
    """

    lookfrom: tuple[float, float, float] = (0.0, 0.0, 0.0)
    lookat: tuple[float, float, float] = (0.0, 0.0, -1.0)
    vup: tuple[float, float, float] = (0.0, 1.0, 0.0)
    vfov: float = 90.0
    aspect_ratio: float = 16.0 / 9.0
    aperture: float = 0.0
    focus_dist: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov = {self.vfov} must be in (0, 180) degrees")
        if self.aspect_ratio <= 0.0:
            raise ValueError(f"aspect_ratio = {self.aspect_ratio} must be positive")
        if self.aperture < 0.0:
            raise ValueError(f"aperture = {self.aperture} must be non-negative")
        if self.focus_dist <= 0.0:
            raise ValueError(f"focus_dist = {self.focus_dist} must be positive")


@dataclass(frozen=True, slots=True)
class Camera:
    """Derived camera state used for ray generation.

    Build with setup_camera(); never mutated afterwards, so one instance
    can be shared by every render worker.

    Attributes:
        origin: Camera position (center of the lens).
        u: Right direction in world space.
        v: Up direction in world space.
        w: Backward direction (opposite view direction).
        horizontal: Full viewport width vector on the focus plane.
        vertical: Full viewport height vector on the focus plane.
        lower_left_corner: Lower-left corner of the viewport.
        lens_radius: Half the aperture.
    """

    origin: Point3
    u: Vec3
    v: Vec3
    w: Vec3
    horizontal: Vec3
    vertical: Vec3
    lower_left_corner: Point3
    lens_radius: float

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generate a ray through normalized image coordinates (s, t).

        The coordinates are normalized:
        - s = 0: left edge, s = 1: right edge
        - t = 0: bottom edge, t = 1: top edge

        Args:
            s: Horizontal coordinate in [0, 1].
            t: Vertical coordinate in [0, 1].
            rng: The random source used to sample the lens disk.

        Returns:
            A ray from a point on the lens toward the viewport point.
        """
        offset = Vec3.zero()
        if self.lens_radius > 0.0:
            rd = self.lens_radius * random_in_unit_disk(rng)
            offset = self.u * rd.x + self.v * rd.y

        origin = self.origin + offset
        target = self.lower_left_corner + s * self.horizontal + t * self.vertical
        return Ray(origin, target - origin)


# =============================================================================
# Camera Setup
# =============================================================================


def setup_camera(settings: ThinLensCamera) -> Camera:
    """Derive the camera basis and viewport from configuration.

    Args:
        settings: Camera configuration with position, orientation, FOV and lens.

    Returns:
        The immutable Camera used for ray generation.

    Raises:
        ValueError: If lookfrom equals lookat or vup is parallel to the
            view direction.
    """
    theta = math.radians(settings.vfov)
    half_height = math.tan(theta / 2.0)
    half_width = settings.aspect_ratio * half_height

    lookfrom = as_vec3(settings.lookfrom)
    lookat = as_vec3(settings.lookat)
    vup = as_vec3(settings.vup)

    view = lookfrom - lookat
    if view.length_squared() == 0.0:
        raise ValueError("lookfrom and lookat must be distinct points")
    w = view.unit_vector()

    right = vup.cross(w)
    if right.length() <= PARALLEL_TOLERANCE * vup.length():
        raise ValueError(f"vup {vup} is parallel to the view direction")
    u = right.unit_vector()
    v = w.cross(u)

    focus_dist = settings.focus_dist
    horizontal = (2.0 * half_width * focus_dist) * u
    vertical = (2.0 * half_height * focus_dist) * v
    lower_left = lookfrom - horizontal / 2.0 - vertical / 2.0 - focus_dist * w

    return Camera(
        origin=lookfrom,
        u=u,
        v=v,
        w=w,
        horizontal=horizontal,
        vertical=vertical,
        lower_left_corner=lower_left,
        lens_radius=settings.aperture / 2.0,
    )


# =============================================================================
# Utility Functions
# =============================================================================


def get_camera_info(camera: Camera) -> dict[str, tuple[float, float, float]]:
    """Get derived camera vectors for debugging.

    Returns:
        Dictionary with origin, u, v, w, horizontal, vertical, lower_left.
    """
    return {
        "origin": camera.origin.to_tuple(),
        "u": camera.u.to_tuple(),
        "v": camera.v.to_tuple(),
        "w": camera.w.to_tuple(),
        "horizontal": camera.horizontal.to_tuple(),
        "vertical": camera.vertical.to_tuple(),
        "lower_left": camera.lower_left_corner.to_tuple(),
    }
