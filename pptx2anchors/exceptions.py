class ExtractionError(Exception):
    """Base class for all errors raised while extracting a presentation."""

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        self.__cause__ = cause  # Optional chaining for debugging


class InvalidFileFormatError(ExtractionError):
    """Raised when the input cannot be opened as a .pptx container."""

    def __init__(
        self, message: str = None, *, source: str = None, cause: Exception = None
    ):
        self.source = source
        if message is None:
            message = "Invalid PowerPoint file format"
            if source:
                message += f": {source}"
        super().__init__(message, cause=cause)


class ExtractionFileEncryptedError(InvalidFileFormatError):
    """Raised when the presentation is password protected."""


class ExtractionZipBombError(InvalidFileFormatError):
    """Raised when the ZIP container looks like a decompression bomb."""


class DocumentAssemblyError(ExtractionError):
    """Raised when parsed slides violate the document invariants."""


class SlideNotFoundError(ExtractionError, LookupError):
    """Raised when a slide number does not exist in a document."""

    def __init__(self, slide_number: int, total_slides: int = None):
        self.slide_number = slide_number
        self.total_slides = total_slides
        message = f"Slide {slide_number} not found"
        if total_slides is not None:
            message += f" (presentation has {total_slides} slides)"
        super().__init__(message)
