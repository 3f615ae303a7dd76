"""Exceptions raised while loading and parsing ticket data."""


class TicketStatsError(Exception):
    """Base class for all errors raised by ticketstats."""


class InputAccessError(TicketStatsError):
    """Ticket source could not be opened, read or decoded."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read ticket data from {path}: {reason}")


class ParseError(TicketStatsError):
    """A raw ticket record is missing a field or holds a value that cannot be parsed."""

    def __init__(self, field: str | None, message: str, record_index: int | None = None):
        self.field = field
        self.record_index = record_index
        self.message = message
        location = f"record #{record_index}" if record_index is not None else "record"
        if field:
            location = f"{location}, field '{field}'"
        super().__init__(f"{location}: {message}")
