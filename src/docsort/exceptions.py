"""Exception hierarchy for docsort."""


class DocSortError(Exception):
    """Base exception for all docsort errors."""


class TocConfigurationError(DocSortError):
    """Raised when a table-of-contents entry has an unsupported shape."""

    def __init__(self, message: str, entry: object = None) -> None:
        super().__init__(message)
        self.entry = entry


class ConfigFileError(DocSortError):
    """Raised when a documentation config file cannot be loaded."""


class NoteFileError(DocSortError):
    """Raised when a TOC note's backing file cannot be read."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
