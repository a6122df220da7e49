"""3D maths and simple physics: vectors, geometry, signals, logging, particles, springs and waves."""

__version__ = "0.1.0"

__all__ = ["vector", "signal", "logger", "geometry", "solver", "particle", "masspoint", "wave"]