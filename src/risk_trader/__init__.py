"""Risk-managed single-market limit order trader."""

__version__ = "0.1.0"
