"""Errors raised while fetching data sources.

Every error is fatal for a run; the command line converts them to exit status 1.
"""


class DataSourceError(Exception):
    pass


class ConfigurationError(DataSourceError):
    """The category selection is invalid. Raised before any I/O."""


class NotSupportedError(ConfigurationError):
    """The category is known but has no downloadable archive."""


class TransferError(DataSourceError):
    def __init__(self, message, source=None, dest=None):
        super().__init__(message)
        self.source = source
        self.dest = dest


class ReadError(DataSourceError):
    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class IntegrityError(DataSourceError):
    def __init__(self, message, expected, actual):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
