"""Terminal process and CPU usage monitor."""

__version__ = "0.1.0"