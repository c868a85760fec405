"""Browse, filter and export precomputed FPL return-consistency metrics."""

__version__ = "0.1.0"
