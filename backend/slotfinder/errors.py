"""
Domain errors raised by the availability service.

Routers translate them into HTTP 400 responses.
"""


class AvailabilityError(Exception):
    """Base class for availability computation errors."""


class InvalidStartDateError(AvailabilityError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid start date: {value!r} (expected YYYY-MM-DD)")


class InvalidNumberOfDaysError(AvailabilityError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"number_of_days must be an integer, got {value!r}")
