"""mdcast - build podcast feeds from markdown episode directories."""

__version__ = "0.1.0"
