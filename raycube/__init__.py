"""Grid-based raycasting explorer: .cub scene parsing, map checks, ray casting, rendering and a pygame window."""

__version__ = "0.1.0"

__all__ = ["__version__"]