"""Version information for neo-filenames."""

__version__ = "0.1.0"
