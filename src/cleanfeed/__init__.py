"""CleanFeed - load a remote image feed into immutable domain items."""

__version__ = "0.1.0"
