from datetime import date, datetime, timezone
import json

import pytest

from card_format import (
    censor_nik,
    format_indonesian_date,
    format_registration_number,
    format_report_date,
    generate_qr_data,
    parse_event_datetime,
)


@pytest.mark.parametrize("nik", ["", "1", "1234", "12345678"])
def test_censor_nik_short_values_unchanged(nik):
    assert censor_nik(nik) == nik


def test_censor_nik_boundary_nine_characters():
    # longer than the input: the windows are taken independently
    assert censor_nik("123456789") == "1234****6789"


def test_censor_nik_full_length():
    assert censor_nik("3201012345670001") == "3201****0001"


def test_generate_qr_data_decodes_to_the_four_fields():
    payload = json.loads(generate_qr_data(7, 42, "E1-0042", "Siti Aminah"))
    assert payload == {
        "event_id": 7,
        "participant_id": 42,
        "registration_number": "E1-0042",
        "name": "Siti Aminah",
    }


def test_generate_qr_data_pins_key_order():
    payload = generate_qr_data(1, 2, "E1-0002", "Budi")
    assert list(json.loads(payload).keys()) == ["event_id", "participant_id", "registration_number", "name"]


def test_format_indonesian_date_from_plain_date_string():
    assert format_indonesian_date("2024-08-17") == "Sabtu, 17 Agustus 2024"


def test_format_indonesian_date_converts_utc_to_local_zone():
    # 17:30 UTC is already the next day in Jakarta
    assert format_indonesian_date("2024-12-31T17:30:00Z") == "Rabu, 1 Januari 2025"


def test_format_indonesian_date_accepts_date_objects():
    assert format_indonesian_date(date(2025, 3, 3)) == "Senin, 3 Maret 2025"


def test_format_report_date_pads_day():
    assert format_report_date(datetime(2024, 5, 2, 10, 0)) == "02 May 2024"


def test_format_report_date_none_is_empty():
    assert format_report_date(None) == ""


def test_parse_event_datetime_aware_value_moves_to_app_zone():
    parsed = parse_event_datetime(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc))
    assert parsed.hour == 7


def test_parse_event_datetime_blank_string():
    assert parse_event_datetime("  ") is None


def test_format_registration_number_passthrough():
    assert format_registration_number("E3-0001") == "E3-0001"


def test_format_report_date_uses_english_month_names():
    assert format_report_date("2024-08-17T09:00:00+07:00") == "17 August 2024"


def test_format_indonesian_date_rejects_non_iso_strings():
    with pytest.raises(ValueError):
        format_indonesian_date("17/08/2024")
