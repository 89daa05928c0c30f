"""Fiyat listesi kural motoru: baz fiyatlar, ek ücretler, indirimler."""
