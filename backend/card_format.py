"""Display helpers shared by participant cards and prize reports.

Everything here is pure: no database, no network. Card dates use
Indonesian day and month names; the winner report keeps English month names.
Both are shown in the zone named by ``APP_TIMEZONE``.
"""

import json
import os
from datetime import date, datetime, time
from typing import Optional, Union
from zoneinfo import ZoneInfo

NIK_MASK = "****"

WEEKDAYS_ID = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"]
MONTHS_ID = [
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]
MONTHS_EN = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

DateLike = Union[str, date, datetime]


def _timezone() -> ZoneInfo:
    return ZoneInfo(os.environ.get("APP_TIMEZONE", "Asia/Jakarta"))


def parse_event_datetime(value: Optional[DateLike]) -> Optional[datetime]:
    """Coerce an ISO-ish string, date or datetime to a datetime.

    Aware values are moved into the application timezone; naive values are
    taken as already local. Blank strings and ``None`` give ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    else:
        raw = str(value).strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        dt = datetime.fromisoformat(raw)
    if dt.tzinfo is not None:
        dt = dt.astimezone(_timezone())
    return dt


def format_indonesian_date(value: DateLike) -> str:
    """Render as ``Sabtu, 17 Agustus 2024``.

    Raises ``ValueError`` when a string is not an ISO 8601 date or datetime.
    """
    dt = parse_event_datetime(value)
    if dt is None:
        return ""
    return f"{WEEKDAYS_ID[dt.weekday()]}, {dt.day} {MONTHS_ID[dt.month - 1]} {dt.year}"


def format_report_date(value: Optional[DateLike]) -> str:
    dt = parse_event_datetime(value)
    if dt is None:
        return ""
    return f"{dt.day:02d} {MONTHS_EN[dt.month - 1]} {dt.year}"


def censor_nik(nik: str) -> str:
    if len(nik) <= 8:
        return nik
    return nik[:4] + NIK_MASK + nik[-4:]


def format_registration_number(registration_number: str) -> str:
    return registration_number


def generate_qr_data(event_id: int, participant_id: int, registration_number: str, name: str) -> str:
    # key order is part of the payload; scanners compare decoded records only
    return json.dumps(
        {
            "event_id": event_id,
            "participant_id": participant_id,
            "registration_number": registration_number,
            "name": name,
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )
