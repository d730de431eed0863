"""Exceptions raised while extracting a presentation index.

Per-entry errors are caught by the archive walker, logged, and the entry is
skipped. Run-level errors (opening the container, writing the index) abort
the run.
"""


class ExtractionError(Exception):
    """Base class for extraction failures tied to a path."""

    def __init__(self, path: str, message: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        detail = f"{message}: {path}"
        if cause is not None:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class ArchiveOpenError(ExtractionError):
    """The input container cannot be opened or is not a valid archive."""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(path, "Failed to open archive", cause)


class MediaExportError(ExtractionError):
    """A media entry could not be read or its output file written."""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(path, "Failed to export media", cause)


class RelationshipParseError(ExtractionError):
    """A relationship document is not well-formed XML."""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(path, "Failed to parse relationships", cause)


class MissingPageNumberError(ExtractionError):
    """An entry path does not carry a page number."""

    def __init__(self, path: str):
        super().__init__(path, "Can't find valid page number")


class EntryReadError(ExtractionError):
    """An archive entry could not be read or decoded."""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(path, "Failed to read entry", cause)


class SerializationError(ExtractionError):
    """The document index could not be serialized."""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(path, "Failed to serialize index", cause)


class OutputWriteError(ExtractionError):
    """The serialized index could not be written."""

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(path, "Failed to write index", cause)


# Recovered at the walker boundary; everything else ends the run.
PER_ENTRY_ERRORS = (
    MediaExportError,
    RelationshipParseError,
    MissingPageNumberError,
    EntryReadError,
)
