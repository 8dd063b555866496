from datetime import date

from car_rental.domain.services.availability import AvailabilityService
from car_rental.domain.value_objects.date_range import DateRange
from tests.builders import make_booking, make_car, make_user

JUNE = DateRange(date(2028, 6, 1), date(2028, 6, 5))


def test_effective_stock_without_bookings():
    service = AvailabilityService()
    assert service.effective_stock(make_car(stock=2), JUNE, []) == 2


def test_each_overlapping_booking_consumes_one_unit():
    service = AvailabilityService()
    car = make_car(stock=2)
    bookings = [
        make_booking("b-1", make_user("u-1"), car, date(2028, 6, 5), date(2028, 6, 9)),
        make_booking("b-2", make_user("u-2"), car, date(2028, 5, 20), date(2028, 6, 1)),
        make_booking("b-3", make_user("u-3"), car, date(2028, 6, 6), date(2028, 6, 9)),
    ]

    assert len(service.overlapping(car, JUNE, bookings)) == 2
    assert service.effective_stock(car, JUNE, bookings) == 0
    assert not service.is_available_for(car, JUNE, bookings)


def test_bookings_of_other_cars_are_ignored():
    service = AvailabilityService()
    car = make_car("car-a", stock=1)
    other = make_car("car-b", stock=1)
    bookings = [make_booking("b-1", make_user(), other, date(2028, 6, 1), date(2028, 6, 5))]

    assert service.is_available_for(car, JUNE, bookings)


def test_effective_stock_never_negative():
    service = AvailabilityService()
    car = make_car(stock=0)
    bookings = [make_booking("b-1", make_user(), car, date(2028, 6, 1), date(2028, 6, 5))]

    assert service.effective_stock(car, JUNE, bookings) == 0
