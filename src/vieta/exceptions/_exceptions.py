class PipelineError(Exception):
    """Base class for exceptions in this module."""


class FileStoreError(PipelineError, OSError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class DocumentError(PipelineError):
    pass


class ParseError(DocumentError):
    """The text is not a well formed document."""


class MissingFieldError(DocumentError, KeyError):
    """A key along a document path is absent, or a value on the path
    can not be indexed."""

    def __str__(self) -> str:
        # KeyError quotes its argument, we want the plain message
        return str(self.args[0]) if self.args else ""


class TypeMismatchError(DocumentError, TypeError):
    pass


class DecodeError(PipelineError, ValueError):
    pass


class NumberFormatError(PipelineError, ValueError):
    pass
