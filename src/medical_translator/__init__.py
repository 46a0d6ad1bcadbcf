"""Doctor-patient translation and speech relay."""

__version__ = "0.1.0"
