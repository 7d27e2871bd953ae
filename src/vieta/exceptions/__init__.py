from ._exceptions import (
    DecodeError,
    DocumentError,
    FileStoreError,
    MissingFieldError,
    NumberFormatError,
    ParseError,
    PipelineError,
    TypeMismatchError,
)

__all__ = [
    "DecodeError",
    "DocumentError",
    "FileStoreError",
    "MissingFieldError",
    "NumberFormatError",
    "ParseError",
    "PipelineError",
    "TypeMismatchError",
]
