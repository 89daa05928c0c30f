"""Aday rezervasyon için satış fiyatı hesabı.

Eşleşen her fiyat dönemi için ayrı bir teklif üretilir (dönem sırasıyla).
Dönemler çakışabilir; hangisinin kullanılacağı çağıranın kararıdır.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pricelist_engine.engine.gross_price import round_money, rounded_gross_price
from pricelist_engine.engine.validation import parse_stay_date
from pricelist_engine.models.pricelist import (
    AdjustmentRule,
    AppliedAdjustment,
    BookingRequest,
    Discount,
    PricePeriod,
    PriceQuote,
    Product,
    RateBasis,
    Supplement,
)

logger = logging.getLogger(__name__)


def period_matches(period: PricePeriod, booking: BookingRequest) -> bool:
    """Dönemin bu rezervasyon için rezerve edilebilir olup olmadığı."""
    start, end = parse_stay_date(period.date_from), parse_stay_date(period.date_to)
    if start is None or end is None:
        return False
    if not start <= booking.arrival_date <= end:
        return False
    if booking.arrival_date.isoweekday() not in period.arrival_days:
        return False

    if booking.nights < period.min_stay:
        return False
    if period.max_stay is not None and booking.nights > period.max_stay:
        return False

    if not period.min_adults <= booking.adults <= period.max_adults:
        return False
    if not period.min_children <= booking.children <= period.max_children:
        return False

    # Release: varıştan en az release_days gün önce rezerve edilmeli
    if period.release_days > 0 and booking.lead_days < period.release_days:
        return False
    return True


def _qualifying_children(rule: AdjustmentRule, booking: BookingRequest) -> Optional[int]:
    """Yaş aralığı tanımlı değilse None, tanımlıysa aralıktaki çocuk sayısı."""
    if rule.child_age_from is None or rule.child_age_to is None:
        return None
    return sum(1 for age in booking.child_ages if rule.child_age_from <= age <= rule.child_age_to)


def _occupancy_met(rule: AdjustmentRule, booking: BookingRequest) -> bool:
    if rule.min_adults is not None and booking.adults < rule.min_adults:
        return False
    if rule.min_children is not None and booking.children < rule.min_children:
        return False
    return True


def _base_amount(period: PricePeriod, booking: BookingRequest) -> float:
    rate = rounded_gross_price(period.net_price, period.provision_percent)
    if period.basis is RateBasis.PER_PERSON_DAY:
        return round_money(rate * booking.nights * (booking.adults + booking.children))
    return round_money(rate * booking.nights)


def _supplement_charge(rule: Supplement, booking: BookingRequest) -> Optional[float]:
    if not _occupancy_met(rule, booking):
        return None
    units = _qualifying_children(rule, booking)
    if units == 0:
        return None
    rate = rounded_gross_price(rule.net_price, rule.provision_percent)
    return round_money(rate * booking.nights * (units or 1))


def _discount_applies(rule: Discount, booking: BookingRequest) -> bool:
    if not _occupancy_met(rule, booking):
        return False
    if booking.lead_days < rule.days_before_arrival:
        return False
    return _qualifying_children(rule, booking) != 0


def quote_period(
    product: Product,
    period: PricePeriod,
    rules: Iterable[AdjustmentRule],
    booking: BookingRequest,
) -> PriceQuote:
    """Tek bir dönem için fiyat: baz + ek ücretler - indirim yüzdesi."""
    adjustments = []
    supplements_amount = 0.0
    discount_percent = 0.0

    for rule in rules:
        if isinstance(rule, Supplement):
            charge = _supplement_charge(rule, booking)
            if charge is None:
                continue
            supplements_amount += charge
            adjustments.append(AppliedAdjustment(rule.id, rule.kind, rule.title, charge))
        elif _discount_applies(rule, booking):
            discount_percent += rule.percent_value
            adjustments.append(AppliedAdjustment(rule.id, rule.kind, rule.title, rule.percent_value))

    discount_percent = min(discount_percent, 100.0)
    base_amount = _base_amount(period, booking)
    subtotal = round_money(base_amount + supplements_amount)
    discount_amount = round_money(subtotal * discount_percent / 100)

    return PriceQuote(
        period_id=period.id,
        currency=product.currency,
        nights=booking.nights,
        base_amount=base_amount,
        supplements_amount=round_money(supplements_amount),
        discount_percent=discount_percent,
        discount_amount=discount_amount,
        total=round_money(subtotal - discount_amount),
        adjustments=adjustments,
    )


def quote_booking(
    product: Product,
    periods: Iterable[PricePeriod],
    rules: Iterable[AdjustmentRule],
    booking: BookingRequest,
) -> list[PriceQuote]:
    """Rezervasyona uyan tüm dönemler için teklif listesi (boş = rezerve edilemez)."""
    rules = list(rules)
    quotes = [
        quote_period(product, period, rules, booking)
        for period in periods
        if period_matches(period, booking)
    ]
    logger.debug(
        "Teklif: ürün %s, varış %s, %d gece -> %d eşleşen dönem",
        product.product_id, booking.arrival_date, booking.nights, len(quotes),
    )
    return quotes
