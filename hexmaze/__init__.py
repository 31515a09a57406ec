"""A maze-chasing arcade game built on pygame: screens, assets and the frame loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]