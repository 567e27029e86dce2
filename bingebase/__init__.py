"""BingeBase - unified movie/TV catalog and watchlist API."""

__version__ = "1.0.0"
