"""Version information for crowdsrc."""

__version__ = "0.1.0"
