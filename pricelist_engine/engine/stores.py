"""Baz fiyat dönemleri ve ek ücret/indirim kuralları için bellek içi kayıt depoları.

Kayıtlar frozen dataclass'tır; her mutasyon yeni bir kayıt ve yeni bir
koleksiyon üretir. Bilinmeyen id ile yapılan update/remove çağrıları
sessizce yok sayılır (UI iyimser çalışır, tekrarlı çağrılar hata vermemeli).
"""

from __future__ import annotations

import dataclasses
import logging
import uuid
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from pricelist_engine.errors import UnknownFieldError
from pricelist_engine.models.pricelist import (
    AdjustmentRule,
    Discount,
    PricePeriod,
    RateBasis,
    RuleKind,
    Supplement,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def _new_id() -> str:
    return str(uuid.uuid4())


class _RecordStore(Generic[RecordT]):
    """id -> kayıt eşlemesi; ekleme sırası korunur."""

    def __init__(self, records: Optional[Iterable[RecordT]] = None) -> None:
        self._records: dict[str, RecordT] = {r.id: r for r in (records or ())}
        self._snapshot: tuple[RecordT, ...] = tuple(self._records.values())

    @property
    def records(self) -> tuple[RecordT, ...]:
        """Mevcut koleksiyon. Kimliği yalnızca gerçek bir mutasyonda değişir."""
        return self._snapshot

    def get(self, record_id: str) -> Optional[RecordT]:
        return self._records.get(record_id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self._snapshot)

    def _replace_all(self, records: dict[str, RecordT]) -> None:
        self._records = records
        self._snapshot = tuple(records.values())

    def _append(self, record: RecordT) -> RecordT:
        self._replace_all({**self._records, record.id: record})
        logger.debug("Kayıt eklendi: %s (%s)", record.id, type(record).__name__)
        return record

    def update(self, record_id: str, field_name: str, value: Any) -> None:
        """Eşleşen kaydın tek bir alanını değiştirir; sıra korunur."""
        current = self._records.get(record_id)
        if current is None:
            logger.debug("Güncelleme atlandı, kayıt yok: %s", record_id)
            return

        editable = {f.name for f in dataclasses.fields(current)} - {"id"}
        if field_name not in editable:
            raise UnknownFieldError(type(current).__name__, field_name)

        updated = dataclasses.replace(current, **{field_name: value})
        self._replace_all({
            rid: (updated if rid == record_id else rec)
            for rid, rec in self._records.items()
        })

    def remove(self, record_id: str) -> None:
        if record_id not in self._records:
            logger.debug("Silme atlandı, kayıt yok: %s", record_id)
            return
        self._replace_all({
            rid: rec for rid, rec in self._records.items() if rid != record_id
        })


class PricePeriodStore(_RecordStore[PricePeriod]):
    """Bir ürünün tarih aralıklı baz fiyat kuralları."""

    def add(self, **overrides: Any) -> PricePeriod:
        if "basis" in overrides:
            overrides["basis"] = RateBasis(overrides["basis"])
        return self._append(PricePeriod(id=_new_id(), **overrides))

    def update(self, record_id: str, field_name: str, value: Any) -> None:
        # UI ve JSON basis'i string olarak gönderir ("PER_PERSON_DAY")
        if field_name == "basis":
            value = RateBasis(value)
        super().update(record_id, field_name, value)

    def toggle_arrival_day(self, record_id: str, day: int) -> None:
        """Gün kümede varsa çıkarır, yoksa ekler; sonuç artan sırada tutulur."""
        period = self.get(record_id)
        if period is None:
            logger.debug("Varış günü değişikliği atlandı, kayıt yok: %s", record_id)
            return

        days = set(period.arrival_days)
        if day in days:
            days.discard(day)
        else:
            days.add(day)
        self.update(record_id, "arrival_days", tuple(sorted(days)))


class AdjustmentRuleStore(_RecordStore[AdjustmentRule]):
    """Ek ücret (supplement) ve indirim (discount) kuralları aynı depoda tutulur."""

    def add(self, kind: RuleKind, **overrides: Any) -> AdjustmentRule:
        if RuleKind(kind) is RuleKind.SUPPLEMENT:
            return self.add_supplement(**overrides)
        return self.add_discount(**overrides)

    def add_supplement(self, **overrides: Any) -> Supplement:
        return self._append(Supplement(id=_new_id(), **overrides))

    def add_discount(self, **overrides: Any) -> Discount:
        return self._append(Discount(id=_new_id(), **overrides))

    def supplements(self) -> list[Supplement]:
        return [r for r in self._snapshot if isinstance(r, Supplement)]

    def discounts(self) -> list[Discount]:
        return [r for r in self._snapshot if isinstance(r, Discount)]
