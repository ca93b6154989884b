"""Real-time depth-frame obstacle analysis and alert throttling."""

__version__ = "0.1.0"
