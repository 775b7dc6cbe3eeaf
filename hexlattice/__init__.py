"""Cube-coordinate algebra and enumeration for hexagonal lattices."""

from .config import EnumerationLimits, LatticeConfig, ProjectionSettings, load_config
from .conversions import (
    from_cartesian,
    from_cartesian_array,
    from_tuple,
    to_cartesian,
    to_cartesian_array,
    to_tuple,
)
from .coords import Hex, HexDirection, RotationDirection, add, lerp, neg, scale, sub
from .errors import ConfigurationError, HexLatticeError, InvalidArgumentError
from .floodfill import flood_fill, flood_fill_from, flood_fill_layers
from .lines import distance, line
from .logging import configure_logging, get_logger
from .neighbors import (
    DIAGONAL_DIRECTIONS,
    DIRECTION_VECTORS,
    SIDE_DIRECTIONS,
    adjacent_cells,
    diagonal_cells,
    is_diagonal,
    is_side,
    neighbor,
    side_neighbor,
    vector_for,
)
from .regions import disk, ring, spiral
from .rotation import rotate_about, rotate_origin, rotate_steps

__version__ = "0.3.0"

__all__ = [
    "ConfigurationError",
    "DIAGONAL_DIRECTIONS",
    "DIRECTION_VECTORS",
    "EnumerationLimits",
    "Hex",
    "HexDirection",
    "HexLatticeError",
    "InvalidArgumentError",
    "LatticeConfig",
    "ProjectionSettings",
    "RotationDirection",
    "SIDE_DIRECTIONS",
    "__version__",
    "add",
    "adjacent_cells",
    "configure_logging",
    "diagonal_cells",
    "disk",
    "distance",
    "flood_fill",
    "flood_fill_from",
    "flood_fill_layers",
    "from_cartesian",
    "from_cartesian_array",
    "from_tuple",
    "get_logger",
    "is_diagonal",
    "is_side",
    "lerp",
    "line",
    "load_config",
    "neg",
    "neighbor",
    "ring",
    "rotate_about",
    "rotate_origin",
    "rotate_steps",
    "scale",
    "side_neighbor",
    "spiral",
    "sub",
    "to_cartesian",
    "to_cartesian_array",
    "to_tuple",
    "vector_for",
]
