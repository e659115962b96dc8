"""
hoststat - host metrics sampling agent for Linux.
"""

from .const import APP_VERSION as __version__

__all__ = ["__version__"]
