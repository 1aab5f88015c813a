"""repohunt — find git repositories and collect their metadata."""

__version__ = "0.3.0"
