"""Remote control client for a running omxplayer."""

__version__ = "0.1.0"
