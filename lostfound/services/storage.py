"""Filesystem storage for uploaded report and profile images."""

import logging
import uuid
from pathlib import Path

from fastapi import UploadFile

from lostfound.services.errors import InternalError, InvalidArgumentError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})
COPY_CHUNK_BYTES = 64 * 1024


def has_upload(upload: UploadFile | None) -> bool:
    """True if the multipart field carried a file (browsers send an empty part otherwise)."""
    return upload is not None and bool(upload.filename)


class ImageStore:
    """
    Writes uploads under a content root with random names and returns the
    public path they are served at (public_prefix + "/" + filename).
    """

    def __init__(self, root: str | Path, public_prefix: str, max_bytes: int) -> None:
        self.root = Path(root)
        self.public_prefix = public_prefix.rstrip("/")
        self.max_bytes = max_bytes

    def path_for(self, public_path: str) -> Path:
        """Map a public path produced by save() back to its file on disk."""
        return self.root / Path(public_path).name

    def save(self, upload: UploadFile) -> str:
        """Validate extension and size, write the file, and return its public path."""
        ext = Path(upload.filename or "").suffix.lower()
        if ext not in ALLOWED_IMAGE_EXTENSIONS:
            raise InvalidArgumentError(
                "Image must be one of: " + ", ".join(sorted(ALLOWED_IMAGE_EXTENSIONS))
            )

        self.root.mkdir(parents=True, exist_ok=True)
        filename = f"{uuid.uuid4().hex}{ext}"
        target = self.root / filename
        written = 0
        try:
            with target.open("wb") as out:
                upload.file.seek(0)
                while chunk := upload.file.read(COPY_CHUNK_BYTES):
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise InvalidArgumentError(
                            f"Image must not exceed {self.max_bytes // (1024 * 1024) or 1} MB."
                        )
                    out.write(chunk)
        except InvalidArgumentError:
            target.unlink(missing_ok=True)
            raise
        except OSError as e:
            target.unlink(missing_ok=True)
            logger.exception("Image write failed", extra={"image_file": filename})
            raise InternalError("Could not store image") from e
        if written == 0:
            target.unlink(missing_ok=True)
            raise InvalidArgumentError("Uploaded image is empty.")

        logger.info("Stored image", extra={"image_file": filename, "image_bytes": written})
        return f"{self.public_prefix}/{filename}"

    def discard(self, public_path: str) -> None:
        """Remove a stored image whose database write failed."""
        self.path_for(public_path).unlink(missing_ok=True)
