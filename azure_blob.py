import logging
import os
import uuid
from functools import lru_cache

from azure.storage.blob import BlobServiceClient

import config

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_blob_service() -> BlobServiceClient:
     return BlobServiceClient.from_connection_string(
          f"DefaultEndpointsProtocol=https;"
          f"AccountName={config.AZURE_STORAGE_ACCOUNT};"
          f"AccountKey={config.AZURE_STORAGE_KEY};"
          f"EndpointSuffix=core.windows.net"
     )


def _container_url(container: str) -> str:
     return f"https://{config.AZURE_STORAGE_ACCOUNT}.blob.core.windows.net/{container}"


def upload_to_blob(file, container: str, owner_id: str | int) -> str:
     """Store an uploaded file under <owner_id>/<uuid><ext> and return its public URL."""
     ext = os.path.splitext(file.filename or "")[1]
     filename = f"{owner_id}/{uuid.uuid4()}{ext}"
     blob_client = get_blob_service().get_blob_client(container=container, blob=filename)
     blob_client.upload_blob(file.file, overwrite=True)
     log.info("Uploaded %s to container %s", filename, container)
     return f"{_container_url(container)}/{filename}"


def upload_receipt(file, expense_id: int) -> str:
     return upload_to_blob(file, config.RECEIPT_CONTAINER, expense_id)


def delete_from_blob(blob_url: str) -> None:
     """
     Deletes a file from Azure Blob Storage using its full URL
     """
     path = blob_url.split(".blob.core.windows.net/", 1)[-1]
     container, blob_name = path.split("/", 1)
     get_blob_service().get_blob_client(container=container, blob=blob_name).delete_blob()
     log.info("Deleted %s from container %s", blob_name, container)
