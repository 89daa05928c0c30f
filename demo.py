"""
Fiyat listesi motoru demo script'i.

Örnek fiyat listesini kurar, validasyon sorunlarını ve örnek bir
rezervasyon teklifini yazdırır, export dokümanını yerel klasöre bırakır.
Kullanım:
    python demo.py
    python demo.py --ask "Haziran için release süresini artırmalı mıyım?"
"""

import json
import logging
import sys
from datetime import date

from pricelist_engine.assistant import PricingAssistant
from pricelist_engine.config import Settings
from pricelist_engine.engine.sinks import LocalFileSink, S3ExportSink
from pricelist_engine.models.pricelist import BookingRequest, Product, RateBasis, RuleKind
from pricelist_engine.workspace import PricelistWorkspace

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger("demo")


def build_reference_workspace(settings: Settings) -> PricelistWorkspace:
    """Örnek başlangıç verisi (iki dönem, bir ek ücret ve bir indirim)."""
    product = Product(
        product_id=119,
        name="Double Room Sea View HB",
        currency=settings.default_currency,
        service="HB",
        prefix="DBL",
        type="Double Room",
        view="Sea View",
    )
    ws = PricelistWorkspace(product)
    ws.add_period(
        date_from="2026-04-01", date_to="2026-05-01", basis=RateBasis.PER_PERSON_DAY,
        net_price=39.00, provision_percent=21.00, release_days=0, min_stay=3,
        min_adults=2, max_adults=3, min_children=0, max_children=2,
    )
    ws.add_period(
        date_from="2026-06-20", date_to="2026-06-30", basis=RateBasis.PER_ROOM_DAY,
        net_price=120.00, provision_percent=15.00, release_days=7, min_stay=5,
        min_adults=2, max_adults=2, min_children=0, max_children=1,
        arrival_days=(5, 6),  # sadece cuma ve cumartesi
    )
    ws.add_rule(
        RuleKind.SUPPLEMENT, title="Supplement for person on basic bed",
        net_price=12.50, provision_percent=20, min_adults=2, min_children=2,
    )
    ws.add_rule(RuleKind.DISCOUNT, title="Early Booking -10%", percent_value=10, days_before_arrival=30)
    return ws


def main(argv: list[str]) -> int:
    settings = Settings.from_env()
    ws = build_reference_workspace(settings)

    print("💶 Pricelist Rule Engine - Demo")
    print("=" * 60)

    result = ws.check()
    if result.is_valid:
        print("✅ Validasyon: sorun yok")
    for issue in result.errors:
        print(f"   ❌ {issue}")
    for warning in result.warnings:
        print(f"   ⚠️  {warning}")

    booking = BookingRequest(
        arrival_date=date(2026, 4, 10), nights=4, adults=2, child_ages=(5, 9),
        booked_on=date(2026, 2, 1),
    )
    for quote in ws.quote(booking):
        print(f"\n🧾 Teklif (dönem {quote.period_id[:8]}): {quote.total:.2f} {quote.currency}")
        print(f"   Baz: {quote.base_amount:.2f}, ek ücret: {quote.supplements_amount:.2f}, "
              f"indirim: %{quote.discount_percent:g} (-{quote.discount_amount:.2f})")

    sink = (
        S3ExportSink(settings.export_bucket, settings.export_prefix, settings.region_name)
        if settings.export_bucket
        else LocalFileSink(settings.export_dir)
    )
    document = ws.export(sink=sink)
    print(f"\n📤 Export: {len(document['pricelist']['baseRates'])} baz fiyat, format={document['format']}")
    print(json.dumps(document["pricelist"]["baseRates"][0], indent=2)[:400])

    if len(argv) > 2 and argv[1] == "--ask":
        assistant = PricingAssistant(model_id=settings.model_id, region_name=settings.region_name)
        try:
            print(f"\n🤖 {ws.ask_assistant(argv[2], assistant)}")
        except Exception as e:
            logger.error("Asistan hatası: %s", e)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
