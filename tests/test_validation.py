"""Fiyat listesi validasyonu unit testleri."""

from pricelist_engine.engine.validation import PricelistValidator, find_overlaps, validate
from pricelist_engine.models.pricelist import Discount, PricePeriod, Product, Supplement

PRODUCT = Product(product_id=119, name="DBL SV HB", service="HB", type="Double Room")


def _period(**overrides) -> PricePeriod:
    values = dict(id="p1", date_from="2026-04-01", date_to="2026-05-01", net_price=39.0, provision_percent=21.0)
    values.update(overrides)
    return PricePeriod(**values)


class TestProductCompleteness:

    def test_complete_rule_set_has_no_issues(self):
        assert validate(PRODUCT, [_period()], []) == []

    def test_missing_type_and_service(self):
        issues = validate(Product(product_id=1), [_period()], [])
        assert issues == ["Product: no room type selected", "Product: no service selected"]

    def test_missing_service_only(self):
        issues = validate(Product(product_id=1, type="Double Room"), [_period()], [])
        assert issues == ["Product: no service selected"]


class TestPeriodChecks:

    def test_empty_periods(self):
        issues = validate(PRODUCT, [], [])
        assert issues == ["No pricing periods defined"]

    def test_zero_net_price_is_single_indexed_issue(self):
        issues = validate(PRODUCT, [_period(), _period(id="p2", net_price=0)], [])
        assert len(issues) == 1
        assert issues[0].startswith("Period 2:")
        assert "net price" in issues[0]

    def test_missing_dates(self):
        issues = validate(PRODUCT, [_period(date_to=None)], [])
        assert issues == ["Period 1: missing dates"]

    def test_missing_dates_and_price_in_order(self):
        issues = validate(PRODUCT, [_period(date_from="", net_price=-5)], [])
        assert issues == [
            "Period 1: missing dates",
            "Period 1: net price must be greater than 0",
        ]

    def test_inverted_date_range(self):
        issues = validate(PRODUCT, [_period(date_from="2026-06-01", date_to="2026-05-01")], [])
        assert len(issues) == 1
        assert "after end date" in issues[0]

    def test_unparseable_date(self):
        issues = validate(PRODUCT, [_period(date_from="01.06.2026")], [])
        assert issues == ["Period 1: dates must be in YYYY-MM-DD format"]

    def test_min_stay_above_max_stay(self):
        issues = validate(PRODUCT, [_period(min_stay=7, max_stay=3)], [])
        assert issues == ["Period 1: minimum stay (7) exceeds maximum stay (3)"]

    def test_occupancy_bounds(self):
        issues = validate(PRODUCT, [_period(min_adults=3, max_adults=2, min_children=-1)], [])
        assert issues == [
            "Period 1: minimum adults (3) exceeds maximum adults (2)",
            "Period 1: children bounds cannot be negative",
        ]

    def test_empty_arrival_days(self):
        issues = validate(PRODUCT, [_period(arrival_days=())], [])
        assert issues == ["Period 1: no arrival days selected"]

    def test_invalid_weekday_code(self):
        issues = validate(PRODUCT, [_period(arrival_days=(0, 1))], [])
        assert issues == ["Period 1: arrival days must be weekday codes 1-7"]

    def test_negative_provision_and_release(self):
        issues = validate(PRODUCT, [_period(provision_percent=-1, release_days=-2)], [])
        assert issues == [
            "Period 1: provision must be a non-negative number",
            "Period 1: release days cannot be negative",
        ]

    def test_non_finite_price(self):
        issues = validate(PRODUCT, [_period(net_price=float("nan"))], [])
        assert issues == ["Period 1: net price must be greater than 0"]


class TestRuleChecks:

    def test_valid_rules(self):
        rules = [
            Supplement(id="s1", net_price=12.5, provision_percent=20),
            Discount(id="d1", percent_value=10, days_before_arrival=30),
        ]
        assert validate(PRODUCT, [_period()], rules) == []

    def test_zero_priced_supplement_is_allowed(self):
        assert validate(PRODUCT, [_period()], [Supplement(id="s1")]) == []

    def test_rule_issues_use_store_index(self):
        rules = [
            Supplement(id="s1", net_price=-1),
            Discount(id="d1", percent_value=150),
            Discount(id="d2", days_before_arrival=-3, child_age_from=12, child_age_to=2),
        ]
        issues = validate(PRODUCT, [_period()], rules)
        assert issues == [
            "Supplement 1: net price must be a non-negative number",
            "Discount 2: percentage must be between 0 and 100",
            "Discount 3: days before arrival cannot be negative",
            "Discount 3: child age range 12-2 is inverted",
        ]

    def test_negative_occupancy_minimum(self):
        issues = validate(PRODUCT, [_period()], [Supplement(id="s1", min_adults=-1)])
        assert issues == ["Supplement 1: minimum occupancy cannot be negative"]


class TestDeterminism:

    def test_same_input_same_output(self):
        periods = [_period(net_price=0, arrival_days=()), _period(id="p2", date_from=None)]
        rules = [Discount(id="d1", percent_value=-5)]
        assert validate(Product(product_id=1), periods, rules) == validate(Product(product_id=1), periods, rules)


class TestOverlapWarnings:

    def test_overlap_is_warning_not_issue(self):
        periods = [
            _period(),
            _period(id="p2", date_from="2026-04-20", date_to="2026-06-01"),
            _period(id="p3", date_from="2026-07-01", date_to="2026-07-31"),
        ]
        result = PricelistValidator().check(PRODUCT, periods, [])
        assert result.is_valid is True
        assert result.errors == []
        assert len(result.warnings) == 1
        assert find_overlaps(periods) == [(1, 2)]

    def test_invalid_result(self):
        result = PricelistValidator().check(PRODUCT, [], [])
        assert result.is_valid is False
        assert result.errors == ["No pricing periods defined"]
