class JulianPeriodError(Exception):
    """Base error."""

class InvalidDateError(JulianPeriodError, ValueError):
    """Raised when a civil date/time field or a year is out of range or not integral."""

class InvalidJulianDayError(JulianPeriodError, TypeError):
    """Raised when a Julian Date is not a finite real number."""
