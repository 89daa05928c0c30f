"""Fiyat listesi motoru hata sınıfları."""

from __future__ import annotations


class PricelistError(Exception):
    """Tüm fiyat listesi hatalarının temel sınıfı."""
    pass


class UnknownFieldError(PricelistError):
    """Kayıt tipinde bulunmayan (veya değiştirilemeyen) alan güncellenmek istendi."""

    def __init__(self, record_type: str, field_name: str):
        super().__init__(f"{record_type} has no editable field '{field_name}'")
        self.record_type = record_type
        self.field_name = field_name


class PermissionDeniedError(PricelistError):
    """Çağıranın düzenleme yetkisi yok."""
    pass


class PricelistBlockedError(PricelistError):
    """Açık validasyon sorunları varken aktivasyon (veya block_on_issues ile export) denendi."""

    def __init__(self, issues: list[str]):
        super().__init__(f"Pricelist has {len(issues)} open issue(s)")
        self.issues = list(issues)


class DocumentFormatError(PricelistError):
    """Okunan doküman bir fiyat listesi export dokümanı değil."""
    pass
