"""Two-player artillery duel on a deformable terrain, with a pygame front end."""

__version__ = "0.1.0"