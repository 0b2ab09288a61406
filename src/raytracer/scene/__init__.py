"""Scene description and intersection.

Components:
    intersection: The immutable Scene and the nearest-hit query
    builder: SceneBuilder for incremental scene construction
    presets: Ready-made scenes with matching cameras
"""

from .builder import SceneBuilder
from .intersection import Scene, intersect_scene
from .presets import (
    SCENE_NAMES,
    create_default_scene,
    create_random_scene,
    create_scene,
    create_showcase_scene,
)

__all__ = [
    "Scene",
    "intersect_scene",
    "SceneBuilder",
    "SCENE_NAMES",
    "create_default_scene",
    "create_random_scene",
    "create_showcase_scene",
    "create_scene",
]
