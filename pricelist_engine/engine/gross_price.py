"""Neto fiyat + provizyon -> brüt (satış) fiyatı.

Tüm brüt değerler (baz fiyatlar, ek ücretler, teklif hesapları) buradan
türetilir. Yuvarlama yalnızca gösterim/export aşamasında yapılır.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def gross_price(net: float, provision_percent: float) -> float:
    """gross = net * (1 + provision / 100). Negatif girdi mekanik olarak hesaplanır."""
    return net * (1 + provision_percent / 100)


def _to_cents(value: float) -> Decimal:
    # float'ın tam ikili değeri üzerinden; tam yarımlar sıfırdan uzağa (3.125 -> 3.13)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_money(value: float) -> float:
    """Tutarı iki ondalığa yuvarlar, yarımlar yukarı."""
    return float(_to_cents(value))


def rounded_gross_price(net: float, provision_percent: float) -> float:
    return round_money(gross_price(net, provision_percent))


def format_gross_price(net: float, provision_percent: float) -> str:
    """İki ondalık basamaklı string, ör. '47.19'."""
    return f"{_to_cents(gross_price(net, provision_percent)):f}"
