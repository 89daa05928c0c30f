"""Fiyat listesi validasyonu - aktivasyonu engelleyen sorunların listesi.

Sorunlar hiçbir zaman exception olarak fırlatılmaz; sabit bir sırayla
toplanır ve çağırana döndürülür:

1. Ürün tamlığı (oda tipi, hizmet)
2. En az bir fiyat dönemi
3. Dönem bazında kontroller ("Period <n>: ...", 1'den başlar)
4. Ek ücret / indirim kuralı kontrolleri ("Supplement <n>: ...", "Discount <n>: ...")
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from pricelist_engine.models.pricelist import (
    AdjustmentRule,
    ALL_WEEKDAYS,
    PricePeriod,
    Product,
    Supplement,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def parse_stay_date(value: Optional[str]) -> Optional[date]:
    """ISO tarih stringi -> date; boş veya hatalı değer için None."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def _is_bad_amount(value: Optional[float]) -> bool:
    """Negatif veya sonlu olmayan (NaN, inf) değer."""
    return value is not None and (not math.isfinite(value) or value < 0)


def _product_issues(product: Product) -> list[str]:
    issues = []
    if not product.type:
        issues.append("Product: no room type selected")
    if not product.service:
        issues.append("Product: no service selected")
    return issues


def _period_issues(index: int, period: PricePeriod) -> list[str]:
    prefix = f"Period {index}:"
    issues = []

    if not period.date_from or not period.date_to:
        issues.append(f"{prefix} missing dates")
    if not math.isfinite(period.net_price) or period.net_price <= 0:
        issues.append(f"{prefix} net price must be greater than 0")

    if period.date_from and period.date_to:
        start, end = parse_stay_date(period.date_from), parse_stay_date(period.date_to)
        if start is None or end is None:
            issues.append(f"{prefix} dates must be in YYYY-MM-DD format")
        elif start > end:
            issues.append(f"{prefix} start date {period.date_from} is after end date {period.date_to}")

    if _is_bad_amount(period.provision_percent):
        issues.append(f"{prefix} provision must be a non-negative number")
    if period.release_days < 0:
        issues.append(f"{prefix} release days cannot be negative")

    if period.min_stay < 1:
        issues.append(f"{prefix} minimum stay must be at least 1 night")
    if period.max_stay is not None and period.min_stay > period.max_stay:
        issues.append(
            f"{prefix} minimum stay ({period.min_stay}) exceeds maximum stay ({period.max_stay})"
        )

    for label, low, high in (
        ("adults", period.min_adults, period.max_adults),
        ("children", period.min_children, period.max_children),
    ):
        if low < 0 or high < 0:
            issues.append(f"{prefix} {label} bounds cannot be negative")
        elif low > high:
            issues.append(f"{prefix} minimum {label} ({low}) exceeds maximum {label} ({high})")

    if not period.arrival_days:
        issues.append(f"{prefix} no arrival days selected")
    elif any(day not in ALL_WEEKDAYS for day in period.arrival_days):
        issues.append(f"{prefix} arrival days must be weekday codes 1-7")

    return issues


def _rule_issues(index: int, rule: AdjustmentRule) -> list[str]:
    issues = []

    if isinstance(rule, Supplement):
        prefix = f"Supplement {index}:"
        if _is_bad_amount(rule.net_price):
            issues.append(f"{prefix} net price must be a non-negative number")
        if _is_bad_amount(rule.provision_percent):
            issues.append(f"{prefix} provision must be a non-negative number")
    else:
        prefix = f"Discount {index}:"
        if not math.isfinite(rule.percent_value) or not 0 <= rule.percent_value <= 100:
            issues.append(f"{prefix} percentage must be between 0 and 100")
        if rule.days_before_arrival < 0:
            issues.append(f"{prefix} days before arrival cannot be negative")

    age_from, age_to = rule.child_age_from, rule.child_age_to
    if (age_from is not None and age_from < 0) or (age_to is not None and age_to < 0):
        issues.append(f"{prefix} child age cannot be negative")
    elif age_from is not None and age_to is not None and age_from > age_to:
        issues.append(f"{prefix} child age range {age_from}-{age_to} is inverted")

    if (rule.min_adults is not None and rule.min_adults < 0) or (
        rule.min_children is not None and rule.min_children < 0
    ):
        issues.append(f"{prefix} minimum occupancy cannot be negative")

    return issues


def validate(
    product: Product,
    periods: Iterable[PricePeriod],
    rules: Iterable[AdjustmentRule] = (),
) -> list[str]:
    """Ürünün tüm kural setini inceler; boş liste = aktivasyona uygun."""
    periods = list(periods)
    issues = _product_issues(product)

    if not periods:
        issues.append("No pricing periods defined")

    for i, period in enumerate(periods, start=1):
        issues.extend(_period_issues(i, period))

    for i, rule in enumerate(rules, start=1):
        issues.extend(_rule_issues(i, rule))

    return issues


def find_overlaps(periods: Iterable[PricePeriod]) -> list[tuple[int, int]]:
    """Tarih aralıkları çakışan dönem çiftleri (1 tabanlı indeksler).

    Çakışma geçerlidir; hangi dönemin seçileceği çağıranın kararıdır.
    """
    ranges = []
    for i, period in enumerate(periods, start=1):
        start, end = parse_stay_date(period.date_from), parse_stay_date(period.date_to)
        if start is not None and end is not None and start <= end:
            ranges.append((i, start, end))

    overlaps = []
    for a in range(len(ranges)):
        for b in range(a + 1, len(ranges)):
            i, start_i, end_i = ranges[a]
            j, start_j, end_j = ranges[b]
            if start_i <= end_j and start_j <= end_i:
                overlaps.append((i, j))
    return overlaps


class PricelistValidator:
    """Validasyon sonucunu uyarılarla birlikte döndüren sarmalayıcı."""

    def check(
        self,
        product: Product,
        periods: Iterable[PricePeriod],
        rules: Iterable[AdjustmentRule] = (),
    ) -> ValidationResult:
        periods = list(periods)
        errors = validate(product, periods, rules)
        warnings = [
            f"Periods {i} and {j} overlap; both are bookable on the shared dates"
            for i, j in find_overlaps(periods)
        ]
        if errors:
            logger.info("Fiyat listesi validasyonu: %d sorun (ürün %s)", len(errors), product.product_id)
        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)
