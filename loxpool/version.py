"""loxpool version information."""

__version__ = "0.3.0"


def get_version() -> str:
    """Return the installed loxpool version"""
    return __version__
