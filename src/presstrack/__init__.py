"""presstrack: command interpretation for a journalism article tracker."""

__version__ = "0.1.0"
