"""WOL via Webpage: wake pre-configured machines from a browser."""

__version__ = "0.1.0"
