"""Voice command interpretation engine for strength-training logs."""

__version__ = "0.1.0"
