"""
Local disk storage for uploaded syllabus documents.

Files are written to the upload directory as ``<epoch-ms>-<basename>`` and
served by the static ``/uploads`` mount.
"""

import logging
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"


@dataclass
class SyllabusUpload:
    """An uploaded document as received from the client."""

    filename: str
    content: BinaryIO


class SyllabusStorage:
    """Saves uploaded files and returns their public URL path."""

    def __init__(self, upload_dir: Path):
        self._upload_dir = Path(upload_dir)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def save(self, upload: SyllabusUpload) -> str:
        """
        Write an uploaded file to disk.

        Args:
            upload: Client file; only the final component of its name is kept

        Returns:
            URL path under /uploads
        """
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        safe_name = Path(upload.filename).name or "syllabus"
        stored_name = f"{int(time.time() * 1000)}-{safe_name}"

        with open(self._upload_dir / stored_name, "wb") as out:
            shutil.copyfileobj(upload.content, out)

        logger.info("Stored syllabus %s", stored_name)
        return f"{UPLOADS_URL_PREFIX}/{stored_name}"

    def delete(self, url: str) -> None:
        """Remove a file previously returned by ``save``; missing files are ignored."""
        name = Path(url).name
        (self._upload_dir / name).unlink(missing_ok=True)
        logger.info("Removed syllabus %s", name)
