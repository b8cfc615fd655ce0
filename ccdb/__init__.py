"""ccdb - JSON compilation database loader and lookup index."""

__version__ = "0.3.0"
