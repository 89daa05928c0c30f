"""Tek bir ürünün fiyat listesi düzenleme oturumu.

Motorun çağıranı: depoları tutar, yetki bayrağını uygular, aktivasyonu
boş sorun listesine bağlar ve export'u bir hedefe teslim eder. Validasyon
ve brüt fiyatlar her çağrıda güncel veriden yeniden hesaplanır.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pricelist_engine.assistant import PricingAssistant, summarize_rule_set
from pricelist_engine.engine.export import export_filename, serialize
from pricelist_engine.engine.quote import quote_booking
from pricelist_engine.engine.sinks import ExportSink
from pricelist_engine.engine.stores import AdjustmentRuleStore, PricePeriodStore
from pricelist_engine.engine.validation import PricelistValidator, ValidationResult, validate
from pricelist_engine.errors import PermissionDeniedError, PricelistBlockedError
from pricelist_engine.models.pricelist import (
    AdjustmentRule,
    BookingRequest,
    PricePeriod,
    PricelistStatus,
    PriceQuote,
    Product,
    RuleKind,
)

logger = logging.getLogger(__name__)


class PricelistWorkspace:
    """Ürün + baz fiyat dönemleri + ek ücret/indirim kuralları."""

    def __init__(
        self,
        product: Product,
        periods: Optional[list[PricePeriod]] = None,
        rules: Optional[list[AdjustmentRule]] = None,
        can_edit: bool = True,
    ) -> None:
        self.product = product
        self.can_edit = can_edit
        self.periods = PricePeriodStore(periods)
        self.rules = AdjustmentRuleStore(rules)
        self.status = PricelistStatus.DRAFT
        self._validator = PricelistValidator()

    def _require_edit(self) -> None:
        if not self.can_edit:
            raise PermissionDeniedError("Editing this pricelist requires the edit capability")

    def _apply(self, store: Any, action: Any, *args: Any, **kwargs: Any) -> Any:
        self._require_edit()
        before = store.records
        result = action(*args, **kwargs)
        # Aktif listede yapılan gerçek bir değişiklik onu taslağa döndürür
        if store.records is not before and self.status is PricelistStatus.ACTIVE:
            logger.info("Fiyat listesi taslağa döndü: ürün %s", self.product.product_id)
            self.status = PricelistStatus.DRAFT
        return result

    # --- Dönem mutasyonları ---

    def add_period(self, **overrides: Any) -> PricePeriod:
        return self._apply(self.periods, self.periods.add, **overrides)

    def update_period(self, period_id: str, field_name: str, value: Any) -> None:
        self._apply(self.periods, self.periods.update, period_id, field_name, value)

    def toggle_arrival_day(self, period_id: str, day: int) -> None:
        self._apply(self.periods, self.periods.toggle_arrival_day, period_id, day)

    def remove_period(self, period_id: str) -> None:
        self._apply(self.periods, self.periods.remove, period_id)

    # --- Kural mutasyonları ---

    def add_rule(self, kind: RuleKind, **overrides: Any) -> AdjustmentRule:
        return self._apply(self.rules, self.rules.add, kind, **overrides)

    def update_rule(self, rule_id: str, field_name: str, value: Any) -> None:
        self._apply(self.rules, self.rules.update, rule_id, field_name, value)

    def remove_rule(self, rule_id: str) -> None:
        self._apply(self.rules, self.rules.remove, rule_id)

    # --- Okuma tarafı (her çağrıda yeniden hesaplanır) ---

    def issues(self) -> list[str]:
        return validate(self.product, self.periods.records, self.rules.records)

    def check(self) -> ValidationResult:
        return self._validator.check(self.product, self.periods.records, self.rules.records)

    def can_activate(self) -> bool:
        return self.can_edit and not self.issues()

    def activate(self) -> PricelistStatus:
        self._require_edit()
        issues = self.issues()
        if issues:
            logger.warning(
                "Aktivasyon engellendi: ürün %s, %d sorun", self.product.product_id, len(issues)
            )
            raise PricelistBlockedError(issues)
        self.status = PricelistStatus.ACTIVE
        logger.info("Fiyat listesi aktif: ürün %s", self.product.product_id)
        return self.status

    def quote(self, booking: BookingRequest) -> list[PriceQuote]:
        return quote_booking(self.product, self.periods.records, self.rules.records, booking)

    def export(
        self,
        sink: Optional[ExportSink] = None,
        block_on_issues: bool = False,
        exported_at: Optional[str] = None,
    ) -> dict:
        """Export dokümanı üretir, istenirse bir hedefe teslim eder."""
        issues = self.issues()
        if issues:
            if block_on_issues:
                raise PricelistBlockedError(issues)
            logger.warning(
                "Açık sorunlarla export: ürün %s, %d sorun", self.product.product_id, len(issues)
            )

        document = serialize(self.product, self.periods.records, self.rules.records, exported_at)
        if sink is not None:
            sink.deliver(document, export_filename(self.product, document["exportedAt"]))
        return document

    def ask_assistant(self, instruction: str, assistant: PricingAssistant) -> str:
        summary = summarize_rule_set(self.product, self.periods.records, self.rules.records)
        return assistant.suggest(instruction, summary)
