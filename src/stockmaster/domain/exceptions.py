"""Domain-level exceptions.

All failures the core can report are subclasses of StockMasterError so the
CLI layer can catch them uniformly and display user-friendly messages.

Unknown project or product ids are deliberately *not* represented here:
commands referencing them are silent no-ops.
"""


class StockMasterError(Exception):
    """Base class for all stockmaster errors."""


class MalformedPersistedStateError(StockMasterError):
    """The stored application document could not be parsed."""


class MalformedImportFileError(StockMasterError):
    """An imported file does not contain a valid Project document."""


class StorageWriteError(StockMasterError):
    """The durable store rejected or failed a write."""
