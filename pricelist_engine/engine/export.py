"""MARS uyumlu fiyat listesi export dokümanı.

Brüt fiyatlar kayıtlarda saklanmaz; her serileştirmede gross_price ile
yeniden hesaplanır. Serileştirici validasyon yapmaz, çağıran önce
validate() çalıştırıp export'u engelleyip engellemeyeceğine karar verir.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Any, Iterable, Optional

from pricelist_engine.errors import DocumentFormatError
from pricelist_engine.engine.gross_price import format_gross_price
from pricelist_engine.models.pricelist import (
    AdjustmentRule,
    Discount,
    PricePeriod,
    Product,
    RateBasis,
    RuleKind,
    Supplement,
)

logger = logging.getLogger(__name__)

FORMAT_ID = "MARS_COMPATIBLE"

PRODUCT_KEYS = ("service", "prefix", "type", "view", "name")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)


def _plain(value: Any) -> Any:
    if isinstance(value, RateBasis):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def _record_fields(record: Any) -> dict:
    return {
        _camel(f.name): _plain(getattr(record, f.name))
        for f in dataclasses.fields(record)
    }


def utc_timestamp() -> str:
    """ISO-8601 UTC zaman damgası, milisaniye hassasiyetinde ('Z' ekli)."""
    return datetime.utcnow().isoformat(timespec="milliseconds") + "Z"


def serialize_period(period: PricePeriod) -> dict:
    entry = _record_fields(period)
    entry["grossPrice"] = format_gross_price(period.net_price, period.provision_percent)
    return entry


def serialize_rule(rule: AdjustmentRule) -> dict:
    entry = {"id": rule.id, "type": rule.kind.value}
    entry.update({k: v for k, v in _record_fields(rule).items() if k != "id"})
    if isinstance(rule, Supplement):
        entry["grossPrice"] = format_gross_price(rule.net_price, rule.provision_percent)
    return entry


def serialize(
    product: Product,
    periods: Iterable[PricePeriod],
    rules: Iterable[AdjustmentRule] = (),
    exported_at: Optional[str] = None,
) -> dict:
    """Ürün kimliği + baz fiyatlar + kurallar -> export dokümanı."""
    base_rates = [serialize_period(p) for p in periods]
    supplements = [serialize_rule(r) for r in rules]

    document = {
        "pricelist": {
            "id": product.product_id,
            "product": {key: getattr(product, key) for key in PRODUCT_KEYS},
            "currency": product.currency,
            "baseRates": base_rates,
            "supplements": supplements,
        },
        "exportedAt": exported_at or utc_timestamp(),
        "format": FORMAT_ID,
    }
    logger.info(
        "Export hazırlandı: ürün %s, %d baz fiyat, %d kural",
        product.product_id, len(base_rates), len(supplements),
    )
    return document


def export_filename(product: Product, exported_at: Optional[str] = None) -> str:
    day = (exported_at or utc_timestamp()).split("T")[0]
    return f"pricelist_{product.name or 'export'}_{day}.json"


# --- Export dokümanından geri okuma (partner JSON fiyat listesi importu) ---

def _fields_for(cls: type, entry: dict) -> dict:
    if not isinstance(entry, dict):
        raise DocumentFormatError(f"Expected an object in pricelist entries, got {type(entry).__name__}")
    known = {f.name for f in dataclasses.fields(cls)}
    values = {}
    for key, value in entry.items():
        name = _snake(key)
        if name in known:
            values[name] = value
    return values


def _load_period(entry: dict) -> PricePeriod:
    values = _fields_for(PricePeriod, entry)
    if "basis" in values:
        values["basis"] = RateBasis(values["basis"])
    if "arrival_days" in values:
        values["arrival_days"] = tuple(sorted(values["arrival_days"]))
    return PricePeriod(**values)


def _load_rule(entry: dict) -> AdjustmentRule:
    if not isinstance(entry, dict):
        raise DocumentFormatError(f"Expected an object in supplements, got {type(entry).__name__}")
    kind = RuleKind(entry.get("type"))
    cls = Supplement if kind is RuleKind.SUPPLEMENT else Discount
    return cls(**_fields_for(cls, entry))


def load_document(document: dict) -> tuple[Product, list[PricePeriod], list[AdjustmentRule]]:
    """Export dokümanını modellere çevirir. grossPrice okunmaz, yeniden hesaplanır."""
    if not isinstance(document, dict) or document.get("format") != FORMAT_ID:
        raise DocumentFormatError(f"Not a {FORMAT_ID} document")
    pricelist = document.get("pricelist")
    if not isinstance(pricelist, dict) or "id" not in pricelist:
        raise DocumentFormatError("Document has no pricelist section")

    product_data = pricelist.get("product") or {}
    if not isinstance(product_data, dict):
        raise DocumentFormatError("Document product section is not an object")

    try:
        product = Product(
            product_id=pricelist["id"],
            currency=pricelist.get("currency", "EUR"),
            **{key: product_data.get(key, "") for key in PRODUCT_KEYS},
        )
        periods = [_load_period(e) for e in pricelist.get("baseRates", [])]
        rules = [_load_rule(e) for e in pricelist.get("supplements", [])]
    except (KeyError, TypeError, ValueError) as e:
        raise DocumentFormatError(f"Malformed pricelist document: {e}") from e

    logger.info("Doküman okundu: ürün %s, %d dönem, %d kural", product.product_id, len(periods), len(rules))
    return product, periods, rules
