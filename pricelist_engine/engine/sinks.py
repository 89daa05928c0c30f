"""Export dokümanını dosyaya veya S3'e bırakan hedefler.

Teslim "ateşle ve unut" çalışır: hatalar loglanır, çağırana fırlatılmaz.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class ExportSink(ABC):
    """Serileştirilebilir bir değeri ve dosya adını kabul eden hedef."""

    @abstractmethod
    def deliver(self, document: Any, filename: str) -> None:
        ...


class LocalFileSink(ExportSink):
    def __init__(self, directory: str = "exports") -> None:
        self.directory = Path(directory)

    def deliver(self, document: Any, filename: str) -> None:
        path = self.directory / filename
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
            logger.info("Export yazıldı: %s", path)
        except OSError as e:
            logger.warning("Export dosya hatası (%s): %s", path, e)


class S3ExportSink(ExportSink):
    def __init__(
        self,
        bucket_name: str,
        prefix: str = "pricelists/",
        region_name: str = "us-west-2",
        s3_client: Optional[Any] = None,
    ) -> None:
        self.bucket_name = bucket_name
        self.prefix = prefix
        self.s3 = s3_client or boto3.client("s3", region_name=region_name)

    def deliver(self, document: Any, filename: str) -> None:
        key = f"{self.prefix}{filename}"
        try:
            self.s3.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=json.dumps(document, indent=2, ensure_ascii=False, default=str),
                ContentType="application/json",
            )
            logger.info("Export S3'e yüklendi: s3://%s/%s", self.bucket_name, key)
        except ClientError as e:
            logger.warning("S3 export hatası: %s", e)
