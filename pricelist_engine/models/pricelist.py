"""Fiyat listesi (pricelist) veri modelleri."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union


class RateBasis(str, Enum):
    PER_PERSON_DAY = "PER_PERSON_DAY"
    PER_ROOM_DAY = "PER_ROOM_DAY"


class RuleKind(str, Enum):
    SUPPLEMENT = "SUPPLEMENT"
    DISCOUNT = "DISCOUNT"


class PricelistStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"


# Sadece etiketleme için kullanılır, hesaplamaya girmez.
class MealPlan(str, Enum):
    ROOM_ONLY = "RO"
    BED_AND_BREAKFAST = "BB"
    HALF_BOARD = "HB"
    FULL_BOARD = "FB"
    ALL_INCLUSIVE = "AI"


class TransportType(str, Enum):
    FLIGHT = "Flight"
    BUS = "Bus"
    TRAIN = "Train"
    FERRY = "Ferry"
    CAR = "Car"


class ActivityType(str, Enum):
    SIGHTSEEING = "Sightseeing"
    MEAL = "Meal"
    TRANSIT = "Transit"
    FREE_TIME = "FreeTime"


ALL_WEEKDAYS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)


@dataclass(frozen=True)
class Product:
    product_id: int
    name: str = ""
    currency: str = "EUR"
    service: str = ""
    prefix: str = ""
    type: str = ""
    view: str = ""


@dataclass(frozen=True)
class PricePeriod:
    id: str
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    basis: RateBasis = RateBasis.PER_PERSON_DAY
    net_price: float = 0.0
    provision_percent: float = 20.0
    release_days: int = 0
    min_stay: int = 1
    max_stay: Optional[int] = None
    min_adults: int = 1
    max_adults: int = 2
    min_children: int = 0
    max_children: int = 0
    arrival_days: tuple[int, ...] = ALL_WEEKDAYS


@dataclass(frozen=True)
class Supplement:
    id: str
    title: str = "New supplement"
    net_price: float = 0.0
    provision_percent: float = 20.0
    child_age_from: Optional[int] = None
    child_age_to: Optional[int] = None
    min_adults: Optional[int] = None
    min_children: Optional[int] = None

    @property
    def kind(self) -> RuleKind:
        return RuleKind.SUPPLEMENT


@dataclass(frozen=True)
class Discount:
    id: str
    title: str = "New discount"
    percent_value: float = 0.0
    days_before_arrival: int = 0
    child_age_from: Optional[int] = None
    child_age_to: Optional[int] = None
    min_adults: Optional[int] = None
    min_children: Optional[int] = None

    @property
    def kind(self) -> RuleKind:
        return RuleKind.DISCOUNT


AdjustmentRule = Union[Supplement, Discount]


@dataclass(frozen=True)
class BookingRequest:
    arrival_date: date
    nights: int
    adults: int
    child_ages: tuple[int, ...] = ()
    booked_on: Optional[date] = None

    @property
    def children(self) -> int:
        return len(self.child_ages)

    @property
    def lead_days(self) -> int:
        """Rezervasyon ile varış arasındaki gün sayısı (booked_on yoksa bugün)."""
        booked_on = self.booked_on or date.today()
        return (self.arrival_date - booked_on).days


@dataclass
class AppliedAdjustment:
    rule_id: str
    kind: RuleKind
    title: str
    amount: float


@dataclass
class PriceQuote:
    period_id: str
    currency: str
    nights: int
    base_amount: float
    supplements_amount: float
    discount_percent: float
    discount_amount: float
    total: float
    adjustments: list[AppliedAdjustment] = field(default_factory=list)
