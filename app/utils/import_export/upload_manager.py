"""
Staging of uploaded import files on local disk.
"""
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from app.core.config import settings
from app.core.logging_config import log_info

CHUNK_SIZE = 1024 * 1024


class UploadTooLargeError(ValueError):
    """Raised when an upload exceeds the configured maximum size."""


class UploadManager:
    """Writes uploads into the upload directory under a collision-free name."""

    def __init__(self, upload_dir: Optional[Path] = None, max_size_bytes: Optional[int] = None):
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_size_bytes = max_size_bytes or settings.import_max_file_size_bytes

    def _target_path(self, filename: Optional[str]) -> Path:
        # Only the suffix of the client filename is kept.
        suffix = Path(filename or "").suffix.lower()
        return self.upload_dir / f"{uuid.uuid4().hex}{suffix}"

    async def stage(self, upload: UploadFile) -> Path:
        """
        Stream an upload to disk.

        Raises:
            UploadTooLargeError: If the upload exceeds the size limit; the
                partial file is removed
        """
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        target = self._target_path(upload.filename)
        written = 0

        try:
            with open(target, "wb") as out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_size_bytes:
                        raise UploadTooLargeError(
                            f"File exceeds the maximum size of {self.max_size_bytes // (1024 * 1024)} MB"
                        )
                    out.write(chunk)
        except BaseException:
            target.unlink(missing_ok=True)
            raise
        finally:
            await upload.close()

        log_info(f"Staged upload {upload.filename} ({written} bytes)", file_path=str(target))
        return target
