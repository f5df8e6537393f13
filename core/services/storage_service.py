# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles image uploads to the content buckets: type checks, collision-free
# file names, lazy bucket creation and clean-up of replaced images.
# =============================================================================

import logging
import secrets
import string
import time
from urllib.parse import urlparse

from app.config import settings
from app.exceptions import FileTooLargeError, InvalidFileTypeError
from core.services.content_service import ContentResource
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase

# Length of the random part of generated file names
RANDOM_FRAGMENT_LENGTH = 13


def random_base36(length: int = RANDOM_FRAGMENT_LENGTH) -> str:
    """Random lowercase base-36 string."""
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def file_extension(filename: str) -> str:
    """
    Text after the last dot of a file name.

    A name without a dot is returned whole, so "photo" -> "photo".
    """
    return filename.rsplit(".", 1)[-1]


def generate_file_name(original_name: str, now_ms: int | None = None) -> str:
    """
    Build a storage name of the form {unixMillis}-{base36}.{ext}.

    The random fragment keeps two uploads in the same millisecond apart.

    Example:
        generate_file_name("portrait.JPG")  # "1715337600123-k3j9x0q2m1a8z.JPG"
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}-{random_base36()}.{file_extension(original_name)}"


def extract_bucket_from_url(url: str) -> str | None:
    """
    Bucket name from a public storage URL.

    URL format: https://xxx.supabase.co/storage/v1/object/public/{bucket}/{file}
    """
    parts = urlparse(url).path.split("/")
    if "public" in parts:
        index = parts.index("public")
        if index + 1 < len(parts) and parts[index + 1]:
            return parts[index + 1]
    return None


def extract_filename_from_url(url: str) -> str | None:
    """Last path segment of a storage URL."""
    name = urlparse(url).path.rsplit("/", 1)[-1]
    return name or None


class StorageService:
    """
    Service for Supabase Storage operations.

    Handles uploading content images and removing the ones they replace.
    """

    @staticmethod
    def validate_image(content_type: str | None, size_bytes: int) -> None:
        """
        Check MIME type and size of an upload.

        Raises:
            InvalidFileTypeError: If the MIME type isn't an allowed image type
            FileTooLargeError: If the file exceeds MAX_UPLOAD_SIZE_MB
        """
        allowed = settings.allowed_image_types_list
        if (content_type or "").lower() not in allowed:
            raise InvalidFileTypeError(content_type, allowed)

        if size_bytes > settings.max_upload_size_bytes:
            raise FileTooLargeError(size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    @staticmethod
    def ensure_bucket(db: SupabaseClient, bucket: str) -> None:
        """
        Create a public image bucket if Supabase reports it missing.

        Lookup errors other than "not found" are logged and ignored; the
        upload that follows will surface any real problem.
        """
        try:
            db.get_bucket(bucket)
            return
        except SupabaseClientError as e:
            if "not found" not in e.message.lower():
                logger.warning(f"Could not check bucket {bucket}: {e.message}")
                return

        logger.info(f"Bucket {bucket} not found, creating it")
        db.create_bucket(
            bucket,
            public=True,
            file_size_limit=settings.max_upload_size_bytes,
            allowed_mime_types=settings.allowed_image_types_list,
        )

    @staticmethod
    def upload_image(
        db: SupabaseClient,
        resource: ContentResource,
        filename: str,
        content: bytes,
        content_type: str,
        replaces: str | None = None,
    ) -> dict[str, str]:
        """
        Upload an image into the resource's bucket.

        Args:
            db: Request-scoped client
            resource: Content resource owning the bucket
            filename: Original file name (only its extension is kept)
            content: File bytes
            content_type: MIME type reported by the client
            replaces: Public URL of an image this upload supersedes

        Returns:
            {"fileName": storage path, "publicUrl": public URL}

        Raises:
            SupabaseClientError: If the storage write fails
        """
        if resource.ensure_bucket:
            StorageService.ensure_bucket(db, resource.bucket)

        file_name = generate_file_name(filename)
        path = db.upload_file(
            resource.bucket,
            file_name,
            content,
            content_type=content_type,
            upsert=False,
        )
        public_url = db.get_public_url(resource.bucket, path)

        if replaces and replaces != public_url:
            StorageService.remove_by_public_url(db, replaces)

        return {"fileName": path, "publicUrl": public_url}

    @staticmethod
    def remove_by_public_url(db: SupabaseClient, url: str) -> bool:
        """
        Delete a stored object given its public URL.

        URLs outside this project's storage are left alone.

        Returns:
            True if removed (or nothing needed removing), False on failure
        """
        storage_prefix = f"{settings.SUPABASE_URL.rstrip('/')}/storage/"
        if not url.startswith(storage_prefix):
            logger.info(f"External image URL, skipping removal: {url}")
            return True

        bucket = extract_bucket_from_url(url)
        name = extract_filename_from_url(url)
        if not bucket or not name:
            logger.warning(f"Invalid storage URL, cannot remove: {url}")
            return False

        try:
            db.remove_files(bucket, [name])
            return True
        except SupabaseClientError as e:
            logger.warning(f"Failed to remove replaced image {url}: {e.message}")
            return False
