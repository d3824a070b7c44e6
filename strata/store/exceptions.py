"""Exceptions for the strata.store module."""


class StoreError(Exception):
    """Base exception for all store errors."""

    pass


class ConfigurationError(StoreError, TypeError, ValueError):
    """A store or extension was composed with invalid configuration."""

    pass


class NotFoundError(StoreError, KeyError):
    """No value is held under the requested key."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key '{key}' does not exist")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class PatternMismatchError(StoreError, LookupError):
    """Key does not match any pattern of a PatternProxy."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key '{key}' does not match any pattern")


class ContractViolationError(StoreError, TypeError):
    """A value that must be a Store is not one."""

    pass
