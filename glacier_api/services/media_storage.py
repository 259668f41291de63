import os
import uuid
from dataclasses import dataclass
from typing import Optional

import structlog
from google.cloud import storage
from google.oauth2 import service_account

from ..config import Settings
from ..exceptions import MediaStorageError, ValidationError
from ..models.blog_post import MediaType
from ..utils.url_utils import get_extension

logger = structlog.get_logger(__name__)


@dataclass
class UploadedMedia:
    url: str
    public_id: str
    resource_type: str


class MediaStorageService:
    """Blog media store backed by a Google Cloud Storage bucket."""

    def __init__(self, settings: Settings, client: Optional[storage.Client] = None):
        self.settings = settings
        self.bucket_name = settings.storage_bucket
        self.project_id = settings.gcp_project_id
        self.folder = settings.media_folder.strip("/")
        self.allowed_formats = {fmt.lower().lstrip(".") for fmt in settings.media_allowed_formats}

        if client is not None:
            self.client = client
            return

        # Try to load from service account file first (Production/Configured), fallback to ADC (Local/Dev)
        try:
            account_path = settings.gcp_service_account_path
            if account_path and os.path.exists(account_path):
                logger.info("Loading GCP credentials from service account file", path=account_path)
                credentials = service_account.Credentials.from_service_account_file(account_path)
                self.client = storage.Client(credentials=credentials, project=self.project_id)
            else:
                logger.info("No service account file found or configured, using ADC")
                self.client = storage.Client(project=self.project_id)
        except Exception as e:
            logger.error("Failed to initialize GCP Storage Client", error=str(e))
            self.client = None

    def get_public_url(self, blob_name: str) -> str:
        return f"https://storage.googleapis.com/{self.bucket_name}/{blob_name}"

    def validate_format(self, filename: str) -> str:
        extension = get_extension(filename)
        if extension not in self.allowed_formats:
            raise ValidationError(
                f"Unsupported media format: {extension or 'unknown'}. "
                f"Allowed formats: {', '.join(sorted(self.allowed_formats))}"
            )
        return extension

    def upload(self, data: bytes, filename: str, content_type: str) -> UploadedMedia:
        """Uploads media bytes under the blog folder and returns its public URL and identifier."""
        extension = self.validate_format(filename)

        if not self.client:
            raise MediaStorageError("GCP Storage Client not initialized")

        public_id = f"{self.folder}/{uuid.uuid4().hex}" if self.folder else uuid.uuid4().hex
        blob_name = f"{public_id}.{extension}"

        try:
            bucket = self.client.bucket(self.bucket_name)
            blob = bucket.blob(blob_name)
            blob.upload_from_string(data, content_type=content_type)
        except Exception as e:
            logger.error("Failed to upload media to GCS", error=str(e), blob_name=blob_name)
            raise MediaStorageError(f"Failed to upload media: {e}") from e

        logger.info("Uploaded media to GCS", blob_name=blob_name, size=len(data))
        return UploadedMedia(
            url=self.get_public_url(blob_name),
            public_id=public_id,
            resource_type=MediaType.from_content_type(content_type).value,
        )

    def delete(self, public_id: str, resource_type: str) -> bool:
        """Deletes the blob(s) stored under an identifier whose content type matches the resource kind."""
        if not self.client:
            logger.error("GCP Client not initialized")
            return False

        try:
            bucket = self.client.bucket(self.bucket_name)
            deleted = 0
            for blob in self.client.list_blobs(bucket, prefix=public_id):
                if os.path.splitext(blob.name)[0] != public_id:
                    continue
                if blob.content_type and MediaType.from_content_type(blob.content_type).value != resource_type:
                    continue
                blob.delete()
                deleted += 1

            if deleted:
                logger.info("Deleted media from GCS", public_id=public_id, resource_type=resource_type)
                return True
            logger.warning("Media not found in GCS for deletion", public_id=public_id, resource_type=resource_type)
            return False
        except Exception as e:
            logger.error("Failed to delete media from GCS", error=str(e), public_id=public_id)
            return False
