"""servicewait - wait for dependent services to become reachable."""

__version__ = "0.1.0"
