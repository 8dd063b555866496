from datetime import date, datetime

import pytest

from car_rental.domain.errors import InvalidRangeError
from car_rental.domain.value_objects.date_range import DateRange


class TestDateRangeConstruction:
    """Tests para validación de DateRange"""

    def test_single_day_range_is_valid(self):
        date_range = DateRange(date(2028, 6, 1), date(2028, 6, 1))
        assert date_range.get_days() == 1

    def test_start_after_end_raises(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            DateRange(date(2028, 6, 5), date(2028, 6, 1))
        assert exc_info.value.code == "INVALID_DATE_RANGE"

    def test_datetimes_are_truncated_to_dates(self):
        date_range = DateRange(datetime(2028, 6, 1, 23, 59), datetime(2028, 6, 2, 0, 1))
        assert date_range.start_date == date(2028, 6, 1)
        assert date_range.end_date == date(2028, 6, 2)
        assert date_range.get_days() == 2

    def test_is_immutable(self):
        date_range = DateRange(date(2028, 6, 1), date(2028, 6, 5))
        with pytest.raises(AttributeError):
            date_range.start_date = date(2028, 6, 2)

    def test_from_strings(self):
        date_range = DateRange.from_strings("2028-06-01", "2028-06-05")
        assert date_range == DateRange(date(2028, 6, 1), date(2028, 6, 5))

    def test_from_strings_accepts_datetime_text(self):
        date_range = DateRange.from_strings("2028-06-01T10:00:00", "2028-06-05T08:00:00")
        assert date_range.get_days() == 5

    @pytest.mark.parametrize("start,end", [("junio", "2028-06-05"), ("2028-06-01", "2028-13-01"), ("", "")])
    def test_from_strings_rejects_bad_format(self, start, end):
        with pytest.raises(InvalidRangeError):
            DateRange.from_strings(start, end)


class TestDateRangeBehaviour:
    """Tests para días, pertenencia y superposición"""

    def test_get_days_counts_both_ends(self):
        assert DateRange(date(2028, 6, 1), date(2028, 6, 5)).get_days() == 5

    def test_get_days_across_leap_day(self):
        assert DateRange(date(2028, 2, 28), date(2028, 3, 1)).get_days() == 3

    def test_iter_days_matches_get_days(self):
        date_range = DateRange(date(2028, 12, 30), date(2029, 1, 2))
        days = list(date_range.iter_days())
        assert days == [date(2028, 12, 30), date(2028, 12, 31), date(2029, 1, 1), date(2029, 1, 2)]
        assert len(days) == date_range.get_days()

    def test_iter_days_up_to_last_calendar_date(self):
        date_range = DateRange(date(9999, 12, 30), date.max)
        assert list(date_range.iter_days()) == [date(9999, 12, 30), date(9999, 12, 31)]

    def test_contains_is_inclusive(self):
        date_range = DateRange(date(2028, 6, 1), date(2028, 6, 5))
        assert date_range.contains(date(2028, 6, 1))
        assert date_range.contains(date(2028, 6, 5))
        assert not date_range.contains(date(2028, 6, 6))

    def test_touching_ranges_overlap(self):
        """Un rango que termina el día en que empieza otro se superpone."""
        first = DateRange(date(2028, 6, 1), date(2028, 6, 5))
        second = DateRange(date(2028, 6, 5), date(2028, 6, 8))
        assert first.overlaps(second)
        assert second.overlaps(first)

    def test_adjacent_ranges_do_not_overlap(self):
        first = DateRange(date(2028, 6, 1), date(2028, 6, 5))
        second = DateRange(date(2028, 6, 6), date(2028, 6, 8))
        assert not first.overlaps(second)
        assert not second.overlaps(first)

    def test_contained_range_overlaps(self):
        outer = DateRange(date(2028, 6, 1), date(2028, 6, 30))
        inner = DateRange(date(2028, 6, 10), date(2028, 6, 12))
        assert outer.overlaps(inner)
        assert inner.overlaps(outer)

    def test_str(self):
        assert str(DateRange(date(2028, 6, 1), date(2028, 6, 5))) == "2028-06-01 -> 2028-06-05"
