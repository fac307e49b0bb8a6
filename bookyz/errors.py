# bookyz/errors.py


class BookingFlowError(Exception):
    """A booking transition was called out of order or with a bad value."""


class BookingIncomplete(BookingFlowError):
    """confirm() was called before staff, service, date and time were all set."""


class NotFound(LookupError):
    def __init__(self, label: str, key):
        super().__init__(f"{label} not found")
        self.label = label
        self.key = key
