"""A maze-chase arcade game: collect food, avoid poison, and outrun the ghosts."""

__version__ = "0.1.0"