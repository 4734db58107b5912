"""Content store wrapper for S3 operations."""

import mimetypes
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from botocore.exceptions import ClientError
from pydantic import BaseModel, PrivateAttr

from triggerkit.config import settings
from triggerkit.exceptions import ConfigurationError, UnsupportedOperationError
from triggerkit.logging.config import get_logger
from triggerkit.repositories.base import BaseRepository

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
PATH_DELIMITER = "/"

# Error codes S3 uses for a missing key (GetObject vs HeadObject)
NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


def guess_content_type(name: str) -> str:
    """
    Infer a content type from a key or file name extension.

    Args:
        name: Object key or file path

    Returns:
        MIME type, application/octet-stream when the extension is unknown
    """
    content_type, _ = mimetypes.guess_type(name)
    return content_type or DEFAULT_CONTENT_TYPE


def _is_not_found(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") in NOT_FOUND_CODES


class StoredItem(BaseModel):
    """
    An object or directory in the content store.

    Directories are common prefixes of a delimited listing; they carry no
    size or modification time and have no content.
    """

    path: str
    is_dir: bool = False
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
    content_type: Optional[str] = None

    # Owning ContentStore, set when the item comes out of one
    _store: Any = PrivateAttr(default=None)

    async def read(self) -> bytes:
        """
        Fetch the item's content.

        Raises:
            UnsupportedOperationError: If the item is a directory
            ConfigurationError: If the item is not bound to a store
            ClientError: If S3 rejects the request
        """
        if self.is_dir:
            raise UnsupportedOperationError(f"Directory {self.path!r} has no content")
        if self._store is None:
            raise ConfigurationError(f"Item {self.path!r} is not bound to a content store")
        return await self._store.read_item(self.path)


class ContentStore(BaseRepository):
    """
    Repository for objects in one S3 bucket.

    Keys are treated as ``/``-delimited paths.
    """

    service_name = "s3"

    def __init__(self, bucket: str | None = None, endpoint_url: str | None = None) -> None:
        """
        Initialize ContentStore.

        Args:
            bucket: Bucket name (defaults to the S3_BUCKET setting)
            endpoint_url: Endpoint override (defaults to the S3_ENDPOINT_URL setting)

        Raises:
            ConfigurationError: If no bucket is configured
        """
        super().__init__(endpoint_url or settings.s3_endpoint_url)
        self.bucket = bucket or settings.s3_bucket
        if not self.bucket:
            raise ConfigurationError("Content store requires a bucket name")

    def _bind(self, item: StoredItem) -> StoredItem:
        item._store = self
        return item

    async def list_items(
        self,
        prefix: str = "",
        continuation_token: str | None = None,
    ) -> tuple[list[StoredItem], str | None]:
        """
        List the items directly under a prefix.

        The prefix's own placeholder object is skipped and common prefixes
        are reported as directory items after the objects.

        Args:
            prefix: Key prefix, usually ending with ``/``
            continuation_token: Token returned by a previous call (pagination)

        Returns:
            Tuple of (items, next continuation token or None)
        """
        params: dict[str, Any] = {
            "Bucket": self.bucket,
            "Prefix": prefix,
            "Delimiter": PATH_DELIMITER,
        }
        if continuation_token:
            params["ContinuationToken"] = continuation_token

        async with self.client() as s3:
            response = await s3.list_objects_v2(**params)

        items = [
            self._bind(
                StoredItem(
                    path=obj["Key"],
                    size=obj.get("Size"),
                    last_modified=obj.get("LastModified"),
                )
            )
            for obj in response.get("Contents", [])
            if obj.get("Key") and obj["Key"] != prefix
        ]
        items.extend(
            self._bind(StoredItem(path=common["Prefix"], is_dir=True))
            for common in response.get("CommonPrefixes", [])
            if common.get("Prefix")
        )

        return items, response.get("NextContinuationToken")

    async def get_item(self, key: str) -> Optional[StoredItem]:
        """
        Fetch an item's metadata by key.

        The content is not downloaded until ``StoredItem.read()`` is called.

        Args:
            key: Object key

        Returns:
            StoredItem if found, None otherwise
        """
        async with self.client() as s3:
            try:
                response = await s3.head_object(Bucket=self.bucket, Key=key)
            except ClientError as exc:
                if _is_not_found(exc):
                    return None
                raise

        return self._bind(
            StoredItem(
                path=key,
                size=response.get("ContentLength"),
                last_modified=response.get("LastModified"),
                content_type=response.get("ContentType"),
            )
        )

    @asynccontextmanager
    async def open_item(self, key: str) -> AsyncIterator[Any]:
        """
        Open an item's content as a byte stream.

        The stream is released when the context exits.

        Usage::

            async with store.open_item("reports/2024.csv") as stream:
                async for chunk in stream.iter_chunks():
                    ...
        """
        async with self.client() as s3:
            response = await s3.get_object(Bucket=self.bucket, Key=key)
            async with response["Body"] as stream:
                yield stream

    async def read_item(self, key: str) -> bytes:
        """
        Download an item's full content.

        Args:
            key: Object key

        Returns:
            Object bytes
        """
        async with self.open_item(key) as stream:
            return await stream.read()

    async def put_item(
        self,
        key: str,
        body: bytes,
        content_type: str | None = None,
    ) -> None:
        """
        Write an item.

        Args:
            key: Object key
            body: Content to store
            content_type: MIME type (guessed from the key when omitted)
        """
        content_type = content_type or guess_content_type(key)
        async with self.client() as s3:
            await s3.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        logger.debug(
            "Stored item",
            extra={"context": {"bucket": self.bucket, "key": key, "content_type": content_type}},
        )

    async def put_file(self, key: str, path: str | Path) -> None:
        """
        Upload a local file, typing it from the file's extension.

        Args:
            key: Object key
            path: Local file path
        """
        path = Path(path)
        await self.put_item(key, path.read_bytes(), guess_content_type(path.name))

    async def delete_item(self, key: str) -> None:
        """
        Delete an item.

        Args:
            key: Object key
        """
        async with self.client() as s3:
            await s3.delete_object(Bucket=self.bucket, Key=key)
