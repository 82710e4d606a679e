"""Object-store transport for build listings and downloads (S3)."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Protocol

from .errors import ConfigError, TransportError
from .models import Listing

logger = logging.getLogger(__name__)

DELIMITER = "/"


class BuildStore(Protocol):
    """Bucket-bound listing/download capability.

    Listings are single pages with delimiter ``/`` and keep the store's
    order (lexicographic by key for S3).
    """

    def list_prefixes(self, prefix: str = "") -> Listing:
        ...

    def list_keys(self, prefix: str) -> Listing:
        ...

    def download(self, key: str, handle: BinaryIO) -> None:
        ...


class S3BuildStore:
    def __init__(
        self,
        bucket: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        self.bucket = bucket
        if client is None:
            import boto3
            from botocore.exceptions import BotoCoreError

            try:
                client = boto3.client("s3", region_name=region_name, endpoint_url=endpoint_url)
            except (BotoCoreError, ValueError) as exc:
                raise ConfigError(f"cannot create s3 client for bucket {bucket}: {exc}") from exc
        self._client = client

    def _list(self, prefix: str) -> dict[str, Any]:
        from botocore.exceptions import BotoCoreError, ClientError

        kwargs: dict[str, Any] = {"Bucket": self.bucket, "Delimiter": DELIMITER}
        if prefix:
            kwargs["Prefix"] = prefix
        logger.info("binfetch list bucket=%s prefix=%s", self.bucket, prefix or "<root>")
        try:
            return self._client.list_objects_v2(**kwargs)
        except (ClientError, BotoCoreError) as exc:
            raise TransportError(f"list s3://{self.bucket}/{prefix} failed: {exc}") from exc

    def list_prefixes(self, prefix: str = "") -> Listing:
        response = self._list(prefix)
        items = tuple(entry["Prefix"] for entry in response.get("CommonPrefixes", []))
        return Listing(items=items, truncated=bool(response.get("IsTruncated")))

    def list_keys(self, prefix: str) -> Listing:
        response = self._list(prefix)
        items = tuple(entry["Key"] for entry in response.get("Contents", []))
        return Listing(items=items, truncated=bool(response.get("IsTruncated")))

    def download(self, key: str, handle: BinaryIO) -> None:
        from botocore.exceptions import BotoCoreError, ClientError

        logger.info("binfetch download bucket=%s key=%s", self.bucket, key)
        try:
            self._client.download_fileobj(self.bucket, key, handle)
        except (ClientError, BotoCoreError) as exc:
            raise TransportError(f"download s3://{self.bucket}/{key} failed: {exc}") from exc
