"""Merkezi ayarlar. Proje kökündeki .env dosyası varsa yüklenir."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Proje kokundeki .env dosyasini bul ve yukle (ortam degiskenleri onceliklidir)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass(frozen=True)
class Settings:
    region_name: str = "us-west-2"
    model_id: str = "us.amazon.nova-pro-v1:0"
    export_bucket: Optional[str] = None
    export_prefix: str = "pricelists/"
    export_dir: str = "exports"
    default_currency: str = "EUR"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            region_name=os.environ.get("AWS_DEFAULT_REGION", cls.region_name),
            model_id=os.environ.get("PRICELIST_MODEL_ID", cls.model_id),
            export_bucket=os.environ.get("PRICELIST_EXPORT_BUCKET") or None,
            export_prefix=os.environ.get("PRICELIST_EXPORT_PREFIX", cls.export_prefix),
            export_dir=os.environ.get("PRICELIST_EXPORT_DIR", cls.export_dir),
            default_currency=os.environ.get("PRICELIST_CURRENCY", cls.default_currency),
        )
