from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.exceptions import ArtifactNotFoundError, UploadFailedError
from reportforge.storage.models import PDF_CONTENT_TYPE, ArtifactKind, artifact_key

SCHEME = "s3://"


class S3ArtifactStore(BaseArtifactStore):
    """Stores artifacts as raw objects in one S3 bucket.

    References look like ``s3://<bucket>/<key>``. Objects are written without
    re-encoding and with an explicit content type.
    """

    def __init__(
        self,
        bucket: str,
        prefix: str = "submissions",
        signed_url_ttl_seconds: int = 900,
        client: Any | None = None,
        region: str | None = None,
        endpoint_url: str | None = None,
        timeout_seconds: float = 60.0,
    ) -> None:
        if not bucket:
            raise ValueError("s3_bucket is required for artifact_storage=s3")
        self._bucket = bucket
        self._prefix = prefix
        self._ttl = signed_url_ttl_seconds
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            config=Config(
                connect_timeout=timeout_seconds,
                read_timeout=timeout_seconds,
                retries={"max_attempts": 3, "mode": "standard"},
            ),
        )

    def put(
        self,
        data: bytes,
        kind: ArtifactKind,
        submission_id: str,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        key = artifact_key(self._prefix, submission_id, kind, filename)
        if kind is not ArtifactKind.ORIGINAL:
            content_type = PDF_CONTENT_TYPE
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type or "application/octet-stream",
                Metadata={"submission-id": submission_id, "kind": kind.value},
            )
        except (BotoCoreError, ClientError) as exc:
            raise UploadFailedError(f"S3 upload of {key} failed: {exc}") from exc
        return f"{SCHEME}{self._bucket}/{key}"

    def get_signed_url(self, reference: str) -> str:
        key = self._key(reference)
        try:
            url: str = self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=self._ttl,
            )
        except (BotoCoreError, ClientError) as exc:
            raise ArtifactNotFoundError(f"Cannot sign {reference}: {exc}") from exc
        return url

    def fetch(self, reference: str) -> bytes:
        key = self._key(reference)
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
        except ClientError as exc:
            raise ArtifactNotFoundError(f"Artifact not found: {reference}") from exc
        body: bytes = response["Body"].read()
        return body

    def _key(self, reference: str) -> str:
        expected = f"{SCHEME}{self._bucket}/"
        if not reference.startswith(expected):
            raise ArtifactNotFoundError(
                f"Reference {reference} does not belong to bucket {self._bucket}"
            )
        return reference[len(expected) :]
