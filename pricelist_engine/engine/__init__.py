from pricelist_engine.engine.export import FORMAT_ID, export_filename, load_document, serialize
from pricelist_engine.engine.gross_price import format_gross_price, gross_price, rounded_gross_price
from pricelist_engine.engine.quote import quote_booking
from pricelist_engine.engine.stores import AdjustmentRuleStore, PricePeriodStore
from pricelist_engine.engine.validation import PricelistValidator, ValidationResult, validate

__all__ = [
    "FORMAT_ID",
    "AdjustmentRuleStore",
    "PricePeriodStore",
    "PricelistValidator",
    "ValidationResult",
    "export_filename",
    "format_gross_price",
    "gross_price",
    "load_document",
    "quote_booking",
    "rounded_gross_price",
    "serialize",
    "validate",
]
