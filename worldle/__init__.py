"""HTTP backend for a country-guessing game played on territory silhouettes."""

__version__ = "0.1.0"