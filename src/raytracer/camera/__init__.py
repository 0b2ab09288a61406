"""Camera module for view and ray generation.

Components:
    thin_lens: Thin-lens camera with depth of field (a pinhole when the
        aperture is zero)

Camera responsibilities:
    - Transform (s, t) image coordinates to world-space rays
    - Support look-at positioning with up vector
    - Compute the viewport from vertical field of view and aspect ratio
    - Jitter ray origins across the lens for defocus blur

Ray generation uses normalized image coordinates:
    s in [0, 1]: left to right across image
    t in [0, 1]: bottom to top across image
"""

from .thin_lens import Camera, ThinLensCamera, get_camera_info, setup_camera

__all__ = [
    "ThinLensCamera",
    "Camera",
    "setup_camera",
    "get_camera_info",
]
