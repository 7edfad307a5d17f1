"""Playlists of surah recitations: build, list, save, load and play them."""

__version__ = "0.1.0"
__all__ = ["__version__"]