class I18nError(Exception):
    """Base class for locale provider errors."""


class SourceLoadError(I18nError, RuntimeError):
    """Raised when a translation source for a locale could not be loaded."""

    def __init__(self, locale: str, message: str = "Error loading locale source"):
        super().__init__(f"{message}: {locale}")
        self.locale = locale


class SourceNotFoundError(SourceLoadError):
    """Raised when no translation catalog exists for a locale."""

    def __init__(self, locale: str):
        super().__init__(locale, "No translation catalog for locale")


class SourceFormatError(I18nError, ValueError):
    """Raised when a loader result or catalog has the wrong shape."""
