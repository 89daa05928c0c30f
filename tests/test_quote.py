"""Rezervasyon teklif hesabı unit testleri."""

import dataclasses
from datetime import date

import pytest

from pricelist_engine.engine.quote import period_matches, quote_booking
from pricelist_engine.models.pricelist import (
    BookingRequest,
    Discount,
    PricePeriod,
    Product,
    RateBasis,
    RuleKind,
    Supplement,
)

PRODUCT = Product(product_id=119, service="HB", type="Double Room")

SPRING = PricePeriod(
    id="1", date_from="2026-04-01", date_to="2026-05-01", basis=RateBasis.PER_PERSON_DAY,
    net_price=39.00, provision_percent=21.00, min_stay=3,
    min_adults=2, max_adults=3, min_children=0, max_children=2,
)
JUNE = PricePeriod(
    id="2", date_from="2026-06-20", date_to="2026-06-30", basis=RateBasis.PER_ROOM_DAY,
    net_price=120.00, provision_percent=15.00, release_days=7, min_stay=5,
    min_adults=2, max_adults=2, min_children=0, max_children=1, arrival_days=(5, 6),
)
BASIC_BED = Supplement(
    id="s1", title="Supplement for person on basic bed", net_price=12.50, provision_percent=20,
    min_adults=2, min_children=2,
)
EARLY_BOOKING = Discount(id="d1", title="Early Booking -10%", percent_value=10, days_before_arrival=30)


def _booking(**overrides) -> BookingRequest:
    # 2026-04-10 bir cuma
    values = dict(arrival_date=date(2026, 4, 10), nights=4, adults=2, child_ages=(5, 9), booked_on=date(2026, 2, 1))
    values.update(overrides)
    return BookingRequest(**values)


class TestPeriodMatching:

    def test_matching_period(self):
        assert period_matches(SPRING, _booking()) is True

    def test_outside_date_range(self):
        assert period_matches(SPRING, _booking(arrival_date=date(2026, 5, 2))) is False

    def test_last_day_is_inclusive(self):
        assert period_matches(SPRING, _booking(arrival_date=date(2026, 5, 1))) is True

    def test_arrival_weekday_not_permitted(self):
        # 2026-06-22 pazartesi, dönem sadece cuma/cumartesi
        booking = _booking(arrival_date=date(2026, 6, 22), nights=5, child_ages=(), booked_on=date(2026, 6, 1))
        assert period_matches(JUNE, booking) is False

    def test_stay_length_bounds(self):
        assert period_matches(SPRING, _booking(nights=2)) is False
        bounded = dataclasses.replace(SPRING, max_stay=3)
        assert period_matches(bounded, _booking(nights=4)) is False

    def test_occupancy_bounds(self):
        assert period_matches(SPRING, _booking(adults=1)) is False
        assert period_matches(SPRING, _booking(child_ages=(1, 2, 3))) is False

    def test_release_cutoff(self):
        # 2026-06-26 cuma
        late = _booking(arrival_date=date(2026, 6, 26), nights=5, child_ages=(), booked_on=date(2026, 6, 22))
        early = _booking(arrival_date=date(2026, 6, 26), nights=5, child_ages=(), booked_on=date(2026, 6, 1))
        assert period_matches(JUNE, late) is False
        assert period_matches(JUNE, early) is True

    def test_period_without_dates_never_matches(self):
        assert period_matches(PricePeriod(id="x"), _booking()) is False


class TestQuote:

    def test_reference_quote(self):
        quotes = quote_booking(PRODUCT, [SPRING, JUNE], [BASIC_BED, EARLY_BOOKING], _booking())
        assert len(quotes) == 1
        quote = quotes[0]
        assert quote.period_id == "1"
        assert quote.currency == "EUR"
        assert quote.base_amount == pytest.approx(47.19 * 4 * 4)
        assert quote.supplements_amount == pytest.approx(15.00 * 4)
        assert quote.discount_percent == 10
        assert quote.discount_amount == pytest.approx(81.50)
        assert quote.total == pytest.approx(733.54)
        assert [a.kind for a in quote.adjustments] == [RuleKind.SUPPLEMENT, RuleKind.DISCOUNT]

    def test_per_room_basis(self):
        booking = _booking(arrival_date=date(2026, 6, 26), nights=5, child_ages=(), booked_on=date(2026, 6, 1))
        quote = quote_booking(PRODUCT, [SPRING, JUNE], [BASIC_BED, EARLY_BOOKING], booking)[0]
        assert quote.base_amount == pytest.approx(138.00 * 5)
        assert quote.supplements_amount == 0
        assert quote.discount_percent == 0  # 25 gün < 30 gün
        assert quote.total == pytest.approx(690.00)

    def test_child_age_supplement_charged_per_qualifying_child(self):
        child_bed = Supplement(id="s2", net_price=10.0, provision_percent=0, child_age_from=2, child_age_to=11)
        quote = quote_booking(PRODUCT, [SPRING], [child_bed], _booking(child_ages=(5, 14)))[0]
        assert quote.supplements_amount == pytest.approx(10.0 * 4)

    def test_child_age_supplement_skipped_without_qualifying_child(self):
        child_bed = Supplement(id="s2", net_price=10.0, provision_percent=0, child_age_from=2, child_age_to=11)
        quote = quote_booking(PRODUCT, [SPRING], [child_bed], _booking(child_ages=(14,)))[0]
        assert quote.supplements_amount == 0
        assert quote.adjustments == []

    def test_discounts_are_capped(self):
        rules = [Discount(id="a", percent_value=70), Discount(id="b", percent_value=60)]
        quote = quote_booking(PRODUCT, [SPRING], rules, _booking())[0]
        assert quote.discount_percent == 100
        assert quote.total == 0

    def test_overlapping_periods_each_quoted(self):
        cheaper = dataclasses.replace(SPRING, id="3", net_price=30.0)
        quotes = quote_booking(PRODUCT, [SPRING, cheaper], [], _booking())
        assert [q.period_id for q in quotes] == ["1", "3"]
        assert quotes[1].total < quotes[0].total

    def test_unbookable_returns_empty(self):
        assert quote_booking(PRODUCT, [SPRING], [], _booking(arrival_date=date(2027, 1, 1))) == []
