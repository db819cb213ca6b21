"""Custom exceptions for jgmenu-ob."""


class JgmenuObError(Exception):
    """Base exception for jgmenu-ob operations."""


class SourceError(JgmenuObError):
    """Menu source could not be opened or generated."""


class ParseError(JgmenuObError):
    """Menu document could not be parsed."""


class UsageError(JgmenuObError):
    """Conflicting or misplaced command-line arguments."""
