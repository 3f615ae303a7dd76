import logging
import re
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

import dacite
from tqdm import tqdm

from ..errors import ParseError
from ..models import RawTicket, Ticket

logger = logging.getLogger(__name__)

# dd.MM.yy H:mm, naive local time; two-digit years always fall in 2000-2099
DATE_TIME_FORMAT = "%d.%m.%y %H:%M"
_DATE_RE = re.compile(r"\d{2}\.\d{2}\.(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"\d{1,2}:\d{2}", re.ASCII)
_PRICE_RE = re.compile(r"\d+", re.ASCII)


def _parse_instant(raw: RawTicket, date_field: str, time_field: str, index: int | None) -> datetime:
    date_str = getattr(raw, date_field).strip()
    time_str = getattr(raw, time_field).strip()
    if not (date_match := _DATE_RE.fullmatch(date_str)):
        raise ParseError(date_field, f"date '{date_str}' does not match dd.MM.yy", index)
    if not _TIME_RE.fullmatch(time_str):
        raise ParseError(time_field, f"time '{time_str}' does not match H:mm", index)
    try:
        instant = datetime.strptime(f"{date_str} {time_str}", DATE_TIME_FORMAT)
    except ValueError as e:
        raise ParseError(f"{date_field}+{time_field}", f"invalid date/time '{date_str} {time_str}': {e}", index) from e
    # %y pivots 69-99 to the 1900s; both centuries share leap years for yy in 01-99
    return instant.replace(year=2000 + int(date_match.group(1)))


def _parse_price(price: Any, index: int | None) -> int:
    if isinstance(price, bool):
        raise ParseError('price', f"price must be numeric, got {price!r}", index)
    if isinstance(price, int):
        value = price
    else:
        if not _PRICE_RE.fullmatch(price.strip()):
            raise ParseError('price', f"price must be numeric, got {price!r}", index)
        value = int(price.strip())
    if value < 0:
        raise ParseError('price', f"price must not be negative, got {value}", index)
    return value


def _load_raw(record: Mapping[str, Any], index: int | None) -> RawTicket:
    if not isinstance(record, Mapping):
        raise ParseError(None, f"expected a JSON object, got {type(record).__name__}", index)
    try:
        return dacite.from_dict(data_class=RawTicket, data=dict(record))
    except dacite.MissingValueError as e:
        raise ParseError(e.field_path, "required field is missing", index) from e
    except dacite.WrongTypeError as e:
        raise ParseError(e.field_path, f"unexpected value {e.value!r}", index) from e


def parse_ticket(record: Mapping[str, Any], index: int | None = None) -> Ticket:
    """Build a Ticket from one raw record.

    Flight duration is arrival minus departure truncated to whole minutes. Raises ParseError
    naming the offending field for missing fields, bad date / time strings, bad prices and
    arrivals before departure.
    """
    raw = _load_raw(record, index)
    departure = _parse_instant(raw, 'departure_date', 'departure_time', index)
    arrival = _parse_instant(raw, 'arrival_date', 'arrival_time', index)
    if arrival < departure:
        raise ParseError('arrival_date+arrival_time', f"arrival {arrival} is before departure {departure}", index)
    duration_minutes = int((arrival - departure).total_seconds() // 60)
    return Ticket(
        origin=raw.origin,
        destination=raw.destination,
        carrier=raw.carrier,
        price=_parse_price(raw.price, index),
        flight_duration_minutes=duration_minutes,
    )


def parse_tickets(records: Iterable[Mapping[str, Any]], show_progress: bool = False) -> list[Ticket]:
    """Parse all records eagerly, aborting on the first malformed one."""
    tickets = [
        parse_ticket(record, index)
        for index, record in enumerate(tqdm(records, desc='Parsing tickets', leave=False, disable=not show_progress))
    ]
    logger.info("Parsed %d tickets", len(tickets))
    return tickets
