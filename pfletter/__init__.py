"""PF Loan Application Generator."""

__version__ = "1.0.0"
