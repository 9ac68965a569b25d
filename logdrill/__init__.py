"""Filter log files by regular expressions, save the matches and serve them over HTTP."""

__version__ = "0.1.0"