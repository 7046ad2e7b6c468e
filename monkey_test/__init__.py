"""Property based testing with generators, shrinkers and reproducible seeds."""

__version__ = "0.7.4"