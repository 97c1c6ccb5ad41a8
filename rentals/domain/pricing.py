"""Pricing catalog and invoice calculation."""

from collections.abc import Mapping
from types import MappingProxyType

from rentals.config import BookingPolicy
from rentals.domain.models import Invoice, Reservation
from rentals.domain.value_objects import CategoryRate, VehicleCategory

DEFAULT_RATES: Mapping[VehicleCategory, CategoryRate] = MappingProxyType(
    {
        VehicleCategory.COMPACT_PETROL: CategoryRate(5000, 100, 50, 0.10),
        VehicleCategory.HYBRID: CategoryRate(7500, 150, 60, 0.12),
        VehicleCategory.ELECTRIC: CategoryRate(10000, 200, 40, 0.08),
        VehicleCategory.LUXURY_SUV: CategoryRate(15000, 250, 75, 0.15),
    }
)


class PricingCatalog:
    """Read-only lookup of category rates."""

    def __init__(self, rates: Mapping[VehicleCategory, CategoryRate] | None = None) -> None:
        rates = DEFAULT_RATES if rates is None else rates
        missing = [category.value for category in VehicleCategory if category not in rates]
        if missing:
            raise ValueError(f"Rate table is missing categories: {', '.join(missing)}")
        self._rates = MappingProxyType(dict(rates))

    @property
    def rates(self) -> Mapping[VehicleCategory, CategoryRate]:
        return self._rates

    def rate_of(self, category: VehicleCategory) -> CategoryRate:
        return self._rates[category]


def calculate_invoice(
    reservation: Reservation,
    actual_km: int,
    catalog: PricingCatalog,
    policy: BookingPolicy,
) -> Invoice:
    """Price a reservation against the distance actually driven.

    The discount applies to the base price only; tax is charged on the
    discounted base plus any extra-kilometer charge. The refundable deposit is
    taken off the final amount.
    """
    rate = catalog.rate_of(reservation.vehicle.category)
    days = reservation.days

    base_price = float(rate.daily_rate * days)
    allowed_km = rate.free_km_per_day * days
    extra_km_charge = (
        float((actual_km - allowed_km) * rate.extra_km_charge) if actual_km > allowed_km else 0.0
    )
    discount = base_price * policy.long_rental_discount if days >= policy.long_rental_days else 0.0
    tax = (base_price - discount + extra_km_charge) * rate.tax_rate
    deposit = float(policy.refundable_deposit)

    return Invoice(
        booking_id=reservation.booking_id,
        actual_km=actual_km,
        allowed_km=allowed_km,
        base_price=base_price,
        extra_km_charge=extra_km_charge,
        discount=discount,
        tax=tax,
        deposit_deducted=deposit,
        final_payable=base_price + extra_km_charge - discount + tax - deposit,
    )
