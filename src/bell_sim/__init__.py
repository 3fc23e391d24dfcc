"""Bell's theorem Monte Carlo: spooky action vs hidden variables."""

__version__ = "0.1.0"
