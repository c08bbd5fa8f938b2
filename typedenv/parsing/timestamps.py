"""Timestamp parsing: RFC 3339 by default, strptime formats on request."""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional

_RFC3339_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<zone>Z|[+-][0-9]{2}:[0-9]{2})"
)


def _parse_zone(zone: str) -> dt.tzinfo:
    if zone == "Z":
        return dt.timezone.utc
    sign = -1 if zone[0] == "-" else 1
    hours, minutes = int(zone[1:3]), int(zone[4:6])
    if minutes >= 60:
        raise ValueError(f"time zone offset out of range: {zone!r}")
    offset = dt.timedelta(hours=hours, minutes=minutes)
    if not offset:
        return dt.timezone.utc
    return dt.timezone(sign * offset)


def parse_rfc3339(raw: str) -> dt.datetime:
    match = _RFC3339_RE.fullmatch(raw)
    if match is None:
        raise ValueError(f"cannot parse {raw!r} as RFC 3339")
    fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
    return dt.datetime(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
        int(fraction),
        tzinfo=_parse_zone(match.group("zone")),
    )


def parse_time(raw: str, fmt: Optional[str] = None) -> dt.datetime:
    """Parse ``raw`` with ``fmt``; an empty format means RFC 3339.

    Results without zone information are taken to be UTC.
    """
    if not fmt:
        return parse_rfc3339(raw)
    parsed = dt.datetime.strptime(raw, fmt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed


__all__ = ["parse_rfc3339", "parse_time"]
