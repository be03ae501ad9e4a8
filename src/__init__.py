"""Field cache sanity checking."""

from cachesanity.version import __version__

__all__ = ["__version__"]
