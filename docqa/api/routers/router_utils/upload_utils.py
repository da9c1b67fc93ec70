"""
Upload router utility functions.

Streams multipart uploads to private scratch directories with a size
limit, and removes them afterwards.

Dependencies: fastapi, tempfile (stdlib)
System role: Upload temp-file handling
"""

import logging
import shutil
import tempfile
from pathlib import Path

from fastapi import UploadFile

from docqa.core.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)

UPLOAD_FILENAME = "upload.pdf"


async def save_upload_to_temp(
    upload: UploadFile,
    max_bytes: int,
    prefix: str = "docqa_",
    read_chunk_bytes: int = 1024 * 1024,
) -> str:
    """
    Stream an upload into a fresh temp directory.

    The client filename is never used for the path.

    Args:
        upload: Uploaded file
        max_bytes: Maximum accepted size
        prefix: Temp directory name prefix
        read_chunk_bytes: Read size per iteration

    Returns:
        str: Path of the written file

    Raises:
        PayloadTooLargeError: When the upload exceeds max_bytes
    """
    temp_dir = tempfile.mkdtemp(prefix=prefix)
    file_path = str(Path(temp_dir) / UPLOAD_FILENAME)

    written = 0
    try:
        with open(file_path, "wb") as f:
            while chunk := await upload.read(read_chunk_bytes):
                written += len(chunk)
                if written > max_bytes:
                    raise PayloadTooLargeError(max_bytes, details={"received_bytes": written})
                f.write(chunk)
    except BaseException:
        cleanup_temp_file(file_path, prefix)
        raise

    logger.debug(
        "Saved upload to temp file",
        extra={"file_path": file_path, "size_bytes": written},
    )
    return file_path


def cleanup_temp_file(file_path: str, prefix: str = "docqa_") -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
        prefix: Prefix identifying our temp directories
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": file_path})

        if parent_dir.exists() and parent_dir.name.startswith(prefix):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except Exception as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": file_path, "error": str(e)},
        )
