"""Preview how alert labels route through notification policies."""

__version__ = "0.1.0"
