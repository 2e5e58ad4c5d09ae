"""End-to-end scenarios across the public API."""

from __future__ import annotations

import pytest

import caldate
from caldate import (
    CaldateError,
    Date,
    DateRange,
    DateRanges,
    Dates,
    Month,
    NullDate,
    PreconditionViolation,
)


class TestBookingScenario:
    """A billing period built from parsed dates."""

    def test_range_from_unordered_dates(self) -> None:
        """Test parsing, ordering and querying a period."""
        dates = Dates([Date.parse("2024-02-29"), Date.parse("2024-01-31")])
        period = DateRange(dates.min(), dates.max())

        assert period.days() == 30
        assert period.contains(Date.parse("2024-02-15"))
        assert str(period) == "2024-01-31/2024-02-29"

    def test_monthly_schedule(self) -> None:
        """Test clamped monthly due dates starting on the 31st."""
        first = Date.parse("2024-01-31")
        due = [first.add_months(i) for i in range(4)]
        assert [str(d) for d in due] == ["2024-01-31", "2024-02-29", "2024-03-31", "2024-04-30"]

    def test_months_of_a_range(self) -> None:
        """Test splitting a range into calendar months."""
        period = DateRange.parse("2024-01-15", "2024-03-10")
        months = []
        month = period.start.to_month()
        while month.before_or_equal(period.end.to_month()):
            months.append(month)
            month = month.add_month()
        assert months == [Month(2024, 1), Month(2024, 2), Month(2024, 3)]
        assert sum(
            period.get_overlapping(m.to_date_range()).days() for m in months
        ) == period.days()

    def test_free_slots(self) -> None:
        """Test finding days not covered by any booking."""
        june = Month(2024, 6).to_date_range()
        booked = DateRanges([
            DateRange.parse("2024-06-10", "2024-06-20"),
            DateRange.parse("2024-06-01", "2024-06-05"),
        ]).sort()
        assert not booked.are_overlapping()
        free = [d for d in june if not any(d in b for b in booked)]
        assert len(free) == june.days() - sum(b.days() for b in booked)
        assert str(free[0]) == "2024-06-06"

    def test_optional_cancellation(self) -> None:
        """Test an optional date through its lifecycle."""
        cancelled = NullDate.null()
        assert cancelled.take_or(Date.zero()).is_zero
        cancelled = Date.today().nullable()
        assert cancelled.map(lambda d: d.add_days(14)).take() == Date.parse("2024-06-19")


class TestErrorContract:
    """Tests for the recoverable and precondition error split."""

    def test_recoverable_errors_share_a_base(self) -> None:
        """Test that callers can catch every recoverable error at once."""
        with pytest.raises(CaldateError):
            Date.parse("nope")
        with pytest.raises(CaldateError):
            Dates().min()
        with pytest.raises(CaldateError):
            NullDate.null().take()

    def test_precondition_violation_escapes_recoverable_handlers(self) -> None:
        """Test that must_* failures are not caught as CaldateError."""
        with pytest.raises(PreconditionViolation):
            try:
                Month.must_parse("June")
            except CaldateError:
                pytest.fail("precondition violation was handled as recoverable")

    def test_precondition_violation_is_assertion(self) -> None:
        """Test the AssertionError base."""
        assert issubclass(PreconditionViolation, AssertionError)

    def test_version(self) -> None:
        """Test the package version."""
        assert caldate.__version__ == "0.1.0"
