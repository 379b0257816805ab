"""
db/errors.py
------------
Error taxonomy of the data layer. All of these are raised at the call that
detects the problem and are never caught inside the package.
"""


class ConfigError(ValueError):
    """A connection mapping is missing one of its required keys."""


class StateError(RuntimeError):
    """A gateway or mapper was used before it was configured."""


class ArgumentError(ValueError):
    """A required SQL fragment was not supplied to a write operation."""
