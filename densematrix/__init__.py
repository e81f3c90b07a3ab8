"""Dense matrices with arithmetic, matrix exponential, Gaussian elimination and a demo command."""

__version__ = "0.1.0"
__all__ = ["matrix", "manip", "cli"]