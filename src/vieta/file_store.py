import logging
import os

from .exceptions import FileStoreError

logger = logging.getLogger(__name__)


def write(path: str | os.PathLike[str], text: str) -> None:
    """Replace the content of path with text.

    The content is flushed to disk before returning.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
    except OSError as err:
        raise FileStoreError(
            f"Could not write to {os.fspath(path)!r}: {err}", os.fspath(path)
        ) from err
    logger.info(f"Wrote {len(text)} characters to {os.fspath(path)}")


def read(path: str | os.PathLike[str]) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as err:
        raise FileStoreError(
            f"Could not read {os.fspath(path)!r}: {err}", os.fspath(path)
        ) from err
    except UnicodeDecodeError as err:
        raise FileStoreError(
            f"Unsupported non UTF-8 content in file: {os.fspath(path)!r}",
            os.fspath(path),
        ) from err
