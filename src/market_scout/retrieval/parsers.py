"""Parsers for provider JSON payloads."""

from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional

from market_scout.models.opportunity import OpportunityRecord, RecordVariant
from market_scout.models.raw import RawOpportunity

# Fallback formats for timestamps fromisoformat rejects
DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%d %b %Y",
    "%b %d, %Y",
)

PROFILE_FIELDS = ("company_name", "founded", "product_range", "website", "address")

# A day of headroom keeps conversion into any zone inside datetime's range
_MIN_UTC = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
_MAX_UTC = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


class MalformedPayloadError(ValueError):
    """Provider body is neither a JSON object nor a list of objects."""


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601-like or RFC-822 timestamp. Returns a UTC datetime
    (naive values are taken as UTC), or None when absent, unparsable or
    too close to the edge of the representable range.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        if not isinstance(value, str) or not value.strip():
            return None
        dt = _parse_string(value.strip())
        if dt is None:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        dt = dt.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None
    if not _MIN_UTC <= dt <= _MAX_UTC:
        return None
    return dt


def _parse_string(value: str) -> Optional[datetime]:
    iso = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def _text(value: Any) -> Optional[str]:
    """Strip to a string; None for empty or missing values."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _product_range(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [p.strip() for p in str(value).split(",") if p.strip()]


def raw_items_from_payload(payload: Any) -> list[RawOpportunity]:
    """
    Wrap a decoded body as a list of raw records.
    A bare object becomes a one-element list; list order is preserved.
    """
    if isinstance(payload, dict):
        items = [payload]
    elif isinstance(payload, list):
        items = payload
    else:
        raise MalformedPayloadError(
            f"Expected a JSON object or array, got {type(payload).__name__}"
        )

    raw_list: list[RawOpportunity] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedPayloadError(
                f"Item {i} is {type(item).__name__}, expected a JSON object"
            )
        raw_list.append(RawOpportunity(data=item))
    return raw_list


def classify(raw: RawOpportunity) -> RecordVariant:
    """Decide which provider shape a raw record has."""
    if raw.first("company_name") is not None:
        return RecordVariant.PROFILE
    if raw.first("summary", "description", "source", "date", "pub_date") is None:
        return RecordVariant.LINK_ONLY
    return RecordVariant.STANDARD


def record_from_raw(raw: RawOpportunity) -> OpportunityRecord:
    """Map one provider object onto the canonical record, resolving field aliases."""
    kind = classify(raw)
    raw_date = raw.first("date", "pub_date", "published_at")
    record_id = raw.first("id")

    company_name = _text(raw.first("company_name"))
    title = _text(raw.first("title", "headline")) or company_name or "Untitled"

    return OpportunityRecord(
        id=str(record_id).strip() if record_id is not None else None,
        kind=kind,
        title=title,
        summary=_text(raw.first("summary", "description")),
        source=_text(raw.first("source")),
        date=parse_timestamp(raw_date),
        raw_date=_text(raw_date),
        link=_text(raw.first("link", "url")),
        company_name=company_name,
        founded=_text(raw.first("founded")),
        product_range=_product_range(raw.first("product_range")),
        website=_text(raw.first("website")),
        address=_text(raw.first("address")),
    )


def normalize_payload(payload: Any) -> list[OpportunityRecord]:
    """Decoded provider body -> list of canonical records."""
    return [record_from_raw(raw) for raw in raw_items_from_payload(payload)]
