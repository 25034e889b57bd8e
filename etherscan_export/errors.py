"""Exceptions raised by the exporter."""


class ExportError(Exception):
    """Base class for all export failures."""


class InvalidAddressError(ExportError):
    """Missing or malformed contract address."""


class ExplorerError(ExportError):
    """The explorer answered with its failure status or an unexpected payload."""


class EmptyManifestError(ExportError):
    """No source files could be recovered from the explorer response."""


class ConfigError(ExportError):
    """Unreadable or malformed configuration."""
