"""
Geologis Backend — City Feed Normalizer
=========================================

What:  Turns the Maersk locations feed into City objects.
How:   Two stages.

    1. Stream splitting. With Content-Type `application/stream+json` the
       upstream body is a bare concatenation of JSON objects:

           {"cityName": "Caracas", ...}{"cityName": "Valencia", ...}

       split_concatenated_records() cuts the text on every `}` and re-appends
       it, keeping only fragments that start with `{`. parse_records() then
       decodes each fragment and silently drops those that do not decode.

       Known limitation: a record holding a nested object or array closes
       early at the inner `}` and its fragments fail to decode, so the record
       is lost. The Maersk location records observed so far are flat.

    2. Reshaping. to_city_model() maps each raw record onto the City shape,
       enriches the country from the local dataset and omits every field
       whose value is falsy, except `country`: an unknown country keeps
       whatever code and name the upstream sent, down to `{}`. This stage
       is all-or-nothing: one bad record makes the whole call return None.

City shape:
    {
        "id": "VECCS",                      # maerskRkstCode
        "name": "Caracas",
        "country": {...},                   # local country without "continent"
        "continent": "SA",
        "region": {"code": "DF", "name": "Distrito Federal"},
        "timezoneId": "America/Caracas",
        "maerskData": {"geolocationId": ..., "countryGeoId": ..., "brands": [...],
                       "brandNames": [...], "stCode": ..., "tsCode": ...},
    }
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from geologis.exceptions import InvalidDataError
from geologis.services.dataset_service import dataset_service

logger = logging.getLogger(__name__)

RECORD_CLOSE = "}"
RECORD_OPEN = "{"

# City.maerskData key → raw upstream field
MAERSK_DATA_FIELDS = {
    "geolocationId": "maerskGeoLocationId",
    "countryGeoId": "countryGeoId",
    "brands": "brands",
    "brandNames": "brandNames",
    "stCode": "maerskRkstCode",
    "tsCode": "maerskRktsCode",
}


# ══════════════════════════════════════════════════════════════════════════
# Stage 1: Stream splitting
# ══════════════════════════════════════════════════════════════════════════


def split_concatenated_records(text: Optional[str]) -> List[str]:
    """
    Split a concatenated-JSON body into per-record strings.

    Each piece between two `}` gets its `}` back and is stripped. Stray text
    in front of a piece's opening brace is cut off; a piece without any
    opening brace is discarded.

    Example:
        '{"a":1}garbage{"b":2}' → ['{"a":1}', '{"b":2}']
    """
    if not text:
        return []

    fragments = []
    for piece in str(text).split(RECORD_CLOSE):
        fragment = (piece + RECORD_CLOSE).strip()
        if not fragment.startswith(RECORD_OPEN):
            opening = fragment.find(RECORD_OPEN)
            if opening == -1:
                continue
            fragment = fragment[opening:]
        fragments.append(fragment)
    return fragments


def parse_records(fragments: Sequence[str]) -> Optional[List[Dict[str, Any]]]:
    """
    Decode each fragment; undecodable fragments are dropped.

    Returns:
        The decoded records (possibly empty when none decode), or None when
        there were no fragments at all.
    """
    if not fragments:
        return None

    records = []
    for fragment in fragments:
        try:
            records.append(json.loads(fragment))
        except json.JSONDecodeError:
            logger.debug("Dropping undecodable upstream fragment: %.80s", fragment)
    return records


def parse_stream(text: Optional[str]) -> Optional[List[Dict[str, Any]]]:
    """split_concatenated_records() + parse_records(); None for an empty body."""
    return parse_records(split_concatenated_records(text))


# ══════════════════════════════════════════════════════════════════════════
# Stage 2: Reshaping
# ══════════════════════════════════════════════════════════════════════════


def _omit_falsy(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value}


def _build_city(record: Dict[str, Any]) -> Dict[str, Any]:
    maersk_data = _omit_falsy(
        {key: record.get(raw_key) for key, raw_key in MAERSK_DATA_FIELDS.items()}
    )

    country = dataset_service.find_country(record.get("countryCode")) or _omit_falsy({
        "code": record.get("countryCode"),
        "name": record.get("countryName"),
    })
    continent = country.pop("continent", None)

    region = None
    if record.get("regionCode"):
        region = {"code": record.get("regionCode"), "name": record.get("regionName")}

    city = {
        "id": record.get("maerskRkstCode"),
        "name": record.get("cityName"),
        "country": country,
        "continent": continent,
        "region": region,
        "timezoneId": record.get("timezoneId"),
        "maerskData": maersk_data,
    }
    # country stays, even as {}
    return {key: value for key, value in city.items() if value or key == "country"}


def to_city_model(records: Any) -> Optional[List[Dict[str, Any]]]:
    """
    Map raw upstream records onto City objects.

    Raises:
        InvalidDataError: `records` is not a list.

    Returns:
        One City per record, in input order, or None if any record could not
        be reshaped (the failure is logged with its traceback).
    """
    if not isinstance(records, list):
        raise InvalidDataError(context={"type": type(records).__name__})

    try:
        return [_build_city(record) for record in records]
    except Exception:
        logger.exception("Failed to reshape %d upstream city records", len(records))
        return None
