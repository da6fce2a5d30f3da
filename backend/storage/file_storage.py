"""
File storage abstraction.

Stores uploaded photos as flat files under a single cache directory.
Every blob is addressed by a generated reference (its file name):

    <millisecond timestamp>_<original name, whitespace replaced by "_">

A reference is never reused; writes use exclusive creation so an existing
blob cannot be overwritten.
"""
import logging
import re
import shutil
import time
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional, Union

from domain.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
DEFAULT_FILENAME = "photo"


def _sanitize_filename(filename: str) -> str:
    # Browsers may send full client paths; keep only the last component.
    name = re.split(r"[\\/]", filename or "")[-1]
    name = _WHITESPACE.sub("_", name.strip())
    if name in ("", ".", ".."):
        return DEFAULT_FILENAME
    return name


class FileStorage:
    """
    Local file storage implementation.

    Files are organized as:
    - {root}/{reference}  - Uploaded photos
    """

    def __init__(self, root: Union[str, Path] = "uploads"):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def make_reference(self, original_name: str, token: Optional[int] = None) -> str:
        """Build a reference from a disambiguating token and the original file name."""
        if token is None:
            token = int(time.time() * 1000)
        return f"{token}_{_sanitize_filename(original_name)}"

    def store(self, data: Union[bytes, BinaryIO], original_name: str) -> str:
        """
        Save a blob under a newly generated reference.

        Args:
            data: Raw bytes or a binary file-like object
            original_name: File name supplied by the client

        Returns:
            The reference of the stored blob
        """
        if isinstance(data, (bytes, bytearray)):
            data = BytesIO(data)

        token = int(time.time() * 1000)
        while True:
            reference = self.make_reference(original_name, token)
            path = self.root / reference
            try:
                fh = open(path, "xb")
            except FileExistsError:
                token += 1
                continue
            except OSError as exc:
                logger.exception("Could not create blob %s", reference)
                raise StorageError() from exc
            break

        try:
            with fh:
                shutil.copyfileobj(data, fh)
        except OSError as exc:
            logger.exception("Could not write blob %s", reference)
            path.unlink(missing_ok=True)
            raise StorageError() from exc
        return reference

    def _path(self, reference: str) -> Path:
        if not reference or reference in (".", "..") or "/" in reference or "\\" in reference:
            raise NotFoundError("Photo file missing")
        return self.root / reference

    def resolve(self, reference: str) -> Path:
        """Absolute path of an existing blob."""
        path = self._path(reference)
        if not path.is_file():
            raise NotFoundError("Photo file missing")
        return path

    def exists(self, reference: str) -> bool:
        try:
            self.resolve(reference)
        except NotFoundError:
            return False
        return True

    def read(self, reference: str) -> BinaryIO:
        """Open a blob for reading. The caller closes the stream."""
        path = self.resolve(reference)
        try:
            return open(path, "rb")
        except FileNotFoundError as exc:
            raise NotFoundError("Photo file missing") from exc
        except OSError as exc:
            raise StorageError() from exc

    def remove(self, reference: str) -> bool:
        """Delete a blob. Returns True if deleted; a missing blob is not an error."""
        try:
            path = self._path(reference)
        except NotFoundError:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError() from exc
        return True
