"""
Storage Service - Poster uploads on local disk
"""

import mimetypes
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import aiofiles

from movie_api.core.config import settings
from movie_api.core.exceptions import InvalidUploadError, PersistenceError
from movie_api.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class StoredFile:
    filename: str
    local_path: Path
    file_size: int
    content_type: Optional[str] = None


class StorageService:
    """Validates uploaded images and writes them under the upload directory"""

    CHUNK_SIZE = 8192

    def __init__(
        self,
        upload_dir: Optional[Path] = None,
        allowed_types: Optional[List[str]] = None,
        max_size: Optional[int] = None,
    ):
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.allowed_types = [ext.lower() for ext in (allowed_types or settings.ALLOWED_IMAGE_TYPES)]
        self.max_size = max_size or settings.MAX_UPLOAD_SIZE

        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _allowed_types_message(self) -> str:
        if len(self.allowed_types) == 1:
            listed = self.allowed_types[0]
        else:
            listed = ", ".join(self.allowed_types[:-1]) + f" and {self.allowed_types[-1]}"
        return f"Only {listed} type files are allowed."

    def _too_large_message(self) -> str:
        return f"File exceeds the maximum size of {self.max_size} bytes."

    def _extension(self, original_filename: str) -> str:
        # Multipart clients sometimes leave the quotes of the header value in place
        name = os.path.basename(original_filename.strip().strip('"'))
        # Everything from the last dot, so a bare ".png" still has an extension
        dot = name.rfind(".")
        return name[dot:].lower() if dot != -1 else ""

    def validate_filename(self, original_filename: Optional[str]) -> str:
        """Check the upload's name and return its normalized extension"""

        if not original_filename:
            raise InvalidUploadError("No file uploaded.")

        extension = self._extension(original_filename)
        if extension not in self.allowed_types:
            raise InvalidUploadError(self._allowed_types_message())

        return extension

    async def _write_limited(self, source, file_path: Path) -> int:
        """Copy source to file_path chunk by chunk, stopping once max_size is passed"""

        written = 0
        async with aiofiles.open(file_path, "wb") as dst:
            while chunk := await source.read(self.CHUNK_SIZE):
                written += len(chunk)
                if written > self.max_size:
                    raise InvalidUploadError(self._too_large_message())
                await dst.write(chunk)
        return written

    async def save_poster(self, source, original_filename: Optional[str]) -> StoredFile:
        """
        Validate and store a poster image under a generated unique name.

        source is anything with an async read(size), such as an UploadFile;
        it is consumed in chunks so an oversized upload is never fully read.
        """

        if source is None:
            raise InvalidUploadError("No file uploaded.")
        extension = self.validate_filename(original_filename)

        filename = f"{uuid.uuid4().hex}{extension}"
        file_path = self.upload_dir / filename

        try:
            file_size = await self._write_limited(source, file_path)
        except InvalidUploadError:
            file_path.unlink(missing_ok=True)
            logger.warning("Rejected oversized poster", original_filename=original_filename)
            raise
        except OSError as e:
            file_path.unlink(missing_ok=True)
            logger.error(f"Failed to save poster {filename}: {e}")
            raise PersistenceError("Failed to store uploaded file") from e

        if file_size == 0:
            file_path.unlink(missing_ok=True)
            raise InvalidUploadError("No file uploaded.")

        logger.info(f"Saved poster: {file_path} ({file_size} bytes)", original_filename=original_filename)

        return StoredFile(
            filename=filename,
            local_path=file_path,
            file_size=file_size,
            content_type=mimetypes.guess_type(filename)[0],
        )
