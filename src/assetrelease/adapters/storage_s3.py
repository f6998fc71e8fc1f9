"""S3 storage adapter."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..core.errors import StorageError
from ..ports.storage import ObjectHead, StoragePort


def _split_key(full_key: str) -> tuple[str, str]:
    bucket, _, key = full_key.partition("/")
    return bucket, key


class S3StorageAdapter(StoragePort):
    """S3-compatible implementation of the storage port (AWS S3, MinIO, ...)."""

    def __init__(
        self,
        client: Any | None = None,
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
    ):
        if client is None:
            try:
                session = boto3.Session(profile_name=profile, region_name=region)
                client = session.client(
                    "s3",
                    endpoint_url=endpoint_url,
                    config=Config(
                        signature_version="s3v4",
                        retries={"max_attempts": 3, "mode": "standard"},
                        # Path-style addressing keeps self-hosted endpoints working
                        s3={"addressing_style": "path"} if endpoint_url else None,
                    ),
                )
            except (BotoCoreError, ClientError) as e:
                raise StorageError(f"Failed to create S3 client: {e}") from e
        self.client = client

    def list(self, prefix: str) -> Iterator[ObjectHead]:
        bucket, key_prefix = _split_key(prefix)
        paginator = self.client.get_paginator("list_objects_v2")
        try:
            for page in paginator.paginate(Bucket=bucket, Prefix=key_prefix):
                for obj in page.get("Contents", []):
                    yield ObjectHead(
                        key=obj["Key"],
                        size=obj.get("Size", 0),
                        etag=obj.get("ETag", "").strip('"'),
                    )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to list objects in bucket '{bucket}': {e}") from e

    def head(self, key: str) -> ObjectHead | None:
        bucket, object_key = _split_key(key)
        try:
            response = self.client.head_object(Bucket=bucket, Key=object_key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return None
            raise StorageError(f"Failed to read metadata of {object_key}: {e}", key=object_key) from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to read metadata of {object_key}: {e}", key=object_key) from e

        return ObjectHead(
            key=object_key,
            size=response.get("ContentLength", 0),
            etag=response.get("ETag", "").strip('"'),
            cache_control=response.get("CacheControl"),
            content_type=response.get("ContentType"),
            content_encoding=response.get("ContentEncoding"),
            metadata=dict(response.get("Metadata") or {}),
        )

    def upload(
        self,
        key: str,
        path: Path,
        *,
        acl: str,
        cache_control: str,
        content_type: str | None,
        content_encoding: str | None,
        metadata: dict[str, str],
    ) -> None:
        bucket, object_key = _split_key(key)
        extra_args: dict[str, Any] = {
            "ACL": acl,
            "CacheControl": cache_control,
            "Metadata": metadata,
        }
        if content_type:
            extra_args["ContentType"] = content_type
        if content_encoding:
            extra_args["ContentEncoding"] = content_encoding

        try:
            self.client.upload_file(str(path), bucket, object_key, ExtraArgs=extra_args)
        except (S3UploadFailedError, ClientError, BotoCoreError) as e:
            raise StorageError(f"Upload failed: {e}", key=object_key) from e

    def copy_in_place(
        self,
        key: str,
        *,
        acl: str,
        cache_control: str | None,
        content_type: str | None,
        content_encoding: str | None,
        metadata: dict[str, str],
    ) -> None:
        bucket, object_key = _split_key(key)
        params: dict[str, Any] = {
            "Bucket": bucket,
            "Key": object_key,
            "CopySource": {"Bucket": bucket, "Key": object_key},
            "ACL": acl,
            "MetadataDirective": "REPLACE",
            "Metadata": metadata,
        }
        if cache_control:
            params["CacheControl"] = cache_control
        if content_type:
            params["ContentType"] = content_type
        if content_encoding:
            params["ContentEncoding"] = content_encoding

        try:
            self.client.copy_object(**params)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Updating failed: {e}", key=object_key) from e

    def delete(self, key: str) -> None:
        bucket, object_key = _split_key(key)
        try:
            self.client.delete_object(Bucket=bucket, Key=object_key)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Delete failed: {e}", key=object_key) from e
