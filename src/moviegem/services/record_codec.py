"""Conversion between spreadsheet rows and BookingRecord values."""

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from moviegem.exceptions import RecordDecodeError
from moviegem.schemas.booking import BOOKING_COLUMNS, BookingRecord

logger = logging.getLogger(__name__)

_bookings_adapter = TypeAdapter(list[BookingRecord])


def decode_bookings(payload: bytes | str | list[Any]) -> list[BookingRecord]:
    """
    Decode a SheetDB response body into booking records.

    Args:
        payload: Raw JSON body, or a body that has already been parsed

    Returns:
        One record per row, in response order

    Raises:
        RecordDecodeError: Body is not JSON, not an array of objects, or a
            row is missing a column or carries a malformed number
    """
    if isinstance(payload, (bytes, str)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise RecordDecodeError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise RecordDecodeError(
            f"Expected a JSON array of rows, got {type(payload).__name__}"
        )

    try:
        records = _bookings_adapter.validate_python(payload)
    except ValidationError as e:
        logger.error(f"Failed to decode {len(payload)} booking rows: {e}")
        raise RecordDecodeError(f"Malformed booking rows: {e}") from e

    return records


def encode_booking(record: BookingRecord) -> dict[str, str]:
    """
    Encode a booking record as a sheet row.

    Every value is written as text, keyed by the sheet's column headers.
    """
    row = record.model_dump(by_alias=True)
    return {column: str(row[column]) for column in BOOKING_COLUMNS}
