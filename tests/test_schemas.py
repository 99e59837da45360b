import pytest
from pydantic import ValidationError

from schemas import CategoryEnum, event_from_payload, participant_from_payload, prize_from_payload


def test_event_from_camel_case_payload():
    record = event_from_payload({
        "id": 1,
        "name": "Festival Rakyat",
        "eventDate": "2024-08-17T09:00:00+07:00",
        "ticketPrice": 0,
        "maxParticipants": 500,
        "participantsCount": 120,
        "availableSlots": 380,
        "registrationStatus": "Pendaftaran dibuka",
        "category": "utama",
        "optimizedBannerUrls": {"thumb": "https://cdn/t.png", "large": None},
        "contactPerson1Name": "Rahmat",
        "contactPerson1Phone": "0811",
        "creator": {"id": 2, "name": "Panitia", "email": "p@example.com", "profilePhoto": "https://cdn/p.png"},
    })
    assert record.event_date.day == 17
    assert record.ticket_price == 0
    assert record.max_participants == 500
    assert record.participants_count == 120
    assert record.category == CategoryEnum.UTAMA
    assert record.optimized_banner_urls == {"thumb": "https://cdn/t.png"}
    assert record.contact_persons == [{"name": "Rahmat", "phone": "0811"}]
    assert record.creator.profile_photo == "https://cdn/p.png"


def test_event_from_legacy_snake_case_payload():
    record = event_from_payload({
        "id": 1,
        "name": "Festival Rakyat",
        "event_date": "2024-08-17",
        "ticket_price": 15000,
        "max_participants": 100,
        "participants_count": 4,
        "banner_url": "https://cdn/b.png",
        "created_at": "2024-07-01T00:00:00Z",
    })
    assert record.event_date.year == 2024
    assert record.ticket_price == 15000
    assert record.banner_url == "https://cdn/b.png"
    assert record.created_at is not None
    assert record.creator is None


def test_event_camel_case_wins_over_legacy():
    record = event_from_payload({"id": 1, "name": "X", "eventDate": "2024-08-17", "event_date": "2023-01-01"})
    assert record.event_date.year == 2024


def test_prize_aliases_and_indonesian_legacy_names():
    canonical = prize_from_payload({"id": 5, "name": "Sepeda", "quantity": 2, "category": "reguler", "eventId": 1})
    alias = prize_from_payload({"prizeId": 5, "prizeName": "Sepeda", "prizeQuantity": 2, "prizeCategory": "reguler"})
    legacy = prize_from_payload({
        "id": 5,
        "nama_hadiah": "Sepeda",
        "jumlah": 2,
        "kategori": "reguler",
        "deskripsi": "Sepeda gunung",
        "event_id": 1,
        "gambar_url": "https://cdn/s.png",
    })

    for record in (canonical, alias, legacy):
        assert record.id == 5
        assert record.name == "Sepeda"
        assert record.quantity == 2
        assert record.category == CategoryEnum.REGULER
    assert legacy.description == "Sepeda gunung"
    assert legacy.image_url == "https://cdn/s.png"
    assert legacy.event_id == 1


def test_prize_nested_event_name_and_counts():
    record = prize_from_payload({
        "id": 1, "name": "TV", "quantity": 3, "event": {"name": "Festival"}, "remainingQuantity": 1, "wonCount": 2,
    })
    assert record.event_name == "Festival"
    assert record.remaining_quantity == 1
    assert record.won_count == 2


def test_prize_without_quantity_is_rejected():
    with pytest.raises(ValidationError):
        prize_from_payload({"id": 1, "name": "TV"})


def test_participant_from_either_spelling():
    camel = participant_from_payload({"id": 1, "name": "Siti", "phoneNumber": "0812", "registrationNumber": "E1-0001"})
    snake = participant_from_payload({"id": 1, "name": "Siti", "phone_number": "0812", "registration_number": "E1-0001"})
    assert camel == snake
