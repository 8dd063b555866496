from datetime import date
from decimal import Decimal

import pytest

from car_rental.domain.errors import LicenseInvalidError, StockExhaustedError
from car_rental.domain.season import Season
from car_rental.domain.value_objects.date_range import DateRange
from car_rental.domain.value_objects.driving_license import DrivingLicense
from tests.builders import make_booking, make_car, make_user


class TestDrivingLicense:
    """Tests para vigencia de la licencia"""

    def test_license_expiring_on_end_date_is_not_valid(self):
        license_ = DrivingLicense("ABC123", date(2028, 6, 5))
        assert not license_.is_valid_for(DateRange(date(2028, 6, 1), date(2028, 6, 5)))

    def test_license_expiring_day_after_end_date_is_valid(self):
        license_ = DrivingLicense("ABC123", date(2028, 6, 6))
        assert license_.is_valid_for(DateRange(date(2028, 6, 1), date(2028, 6, 5)))

    def test_is_valid_on_date(self):
        license_ = DrivingLicense("ABC123", date(2030, 1, 1))
        assert license_.is_valid(date(2029, 12, 31))
        assert not license_.is_valid(date(2030, 1, 1))

    def test_empty_number_rejected(self):
        with pytest.raises(ValueError):
            DrivingLicense("  ", date(2030, 1, 1))


class TestCar:
    """Tests para stock y tarifas del auto"""

    def test_decrement_and_increment_stock(self):
        car = make_car(stock=1)

        car.decrement_stock()
        assert car.stock == 0
        assert not car.is_available()

        car.increment_stock()
        assert car.stock == 1
        assert car.is_available()

    def test_decrement_at_zero_raises(self):
        car = make_car(stock=0)
        with pytest.raises(StockExhaustedError):
            car.decrement_stock()
        assert car.stock == 0

    def test_negative_stock_rejected(self):
        with pytest.raises(ValueError):
            make_car(stock=-1)

    def test_non_positive_price_rejected(self):
        with pytest.raises(ValueError):
            make_car(off_price=Decimal("0"))

    def test_prices_are_coerced_to_decimal(self):
        car = make_car(peak_price="98.43", mid_price=76.89, off_price=53.65)
        assert car.peak_price == Decimal("98.43")
        assert car.mid_price == Decimal("76.89")
        assert car.off_price == Decimal("53.65")

    def test_rate_for_season(self):
        car = make_car()
        assert car.rate_for(Season.PEAK) == Decimal("98.43")
        assert car.rate_for(Season.MID) == Decimal("76.89")
        assert car.rate_for(Season.OFF) == Decimal("53.65")

    def test_snapshot_is_independent(self):
        car = make_car()
        snapshot = car.snapshot()

        car.peak_price = Decimal("200.00")
        car.decrement_stock()

        assert snapshot.peak_price == Decimal("98.43")
        assert snapshot.stock == 3


class TestBooking:
    """Tests para invariantes de la reserva"""

    def test_booking_revalidates_license(self):
        user = make_user(expiry=date(2028, 6, 5))
        with pytest.raises(LicenseInvalidError):
            make_booking("b-1", user, make_car(), date(2028, 6, 1), date(2028, 6, 5))

    def test_total_price_fixed_after_rate_change(self):
        car = make_car()
        booking = make_booking(
            "b-1", make_user(), car, date(2028, 6, 1), date(2028, 6, 5), Decimal("492.15")
        )

        car.peak_price = Decimal("500.00")

        assert booking.total_price == Decimal("492.15")
        assert booking.car.peak_price == Decimal("98.43")

    def test_ids_and_overlap(self):
        booking = make_booking("b-1", make_user("u-1"), make_car("c-1"), date(2028, 6, 1), date(2028, 6, 5))

        assert booking.user_id == "u-1"
        assert booking.car_id == "c-1"
        assert booking.overlaps(DateRange(date(2028, 6, 5), date(2028, 6, 9)))
        assert not booking.overlaps(DateRange(date(2028, 6, 6), date(2028, 6, 9)))

    def test_total_price_coerced_to_decimal(self):
        booking = make_booking(
            "b-1", make_user(), make_car(), date(2028, 6, 1), date(2028, 6, 1), total_price="98.43"
        )
        assert booking.total_price == Decimal("98.43")
