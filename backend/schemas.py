from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any
from enum import Enum
from datetime import datetime

from card_format import parse_event_datetime


class CategoryEnum(str, Enum):
    UTAMA = "utama"
    REGULER = "reguler"


class AdminRoleEnum(str, Enum):
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"
    MODERATOR = "moderator"


# ---------- Card data ----------
class CardEvent(BaseModel):
    id: int
    name: str
    location: Optional[str] = None
    event_date: Optional[datetime] = None


class CardParticipant(BaseModel):
    id: int
    name: str
    nik: str
    phone_number: str
    institution: Optional[str] = None
    email: Optional[str] = None
    registration_number: str


class CardData(BaseModel):
    event: CardEvent
    participant: CardParticipant
    qr_code_svg: str
    banner_data_uri: Optional[str] = None


# ---------- Prizes ----------
class PrizeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: Optional[str] = None
    category: CategoryEnum
    quantity: int
    event_id: int = Field(alias="eventId")
    winnings_count: int = Field(alias="winningsCount")
    remaining_quantity: int = Field(alias="remainingQuantity")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


# ---------- Winner report input ----------
class ReportCreator(BaseModel):
    name: str


class ReportWinner(BaseModel):
    name: str
    participant_number: str


class ReportEvent(BaseModel):
    name: str
    event_date: Optional[datetime] = None
    creator: ReportCreator

    @field_validator("event_date", mode="before")
    @classmethod
    def _parse_event_date(cls, value):
        return parse_event_datetime(value)


class ReportPrize(BaseModel):
    name: str
    quantity: int
    winners: List[ReportWinner] = Field(default_factory=list)


# ---------- Canonical records at the API boundary ----------
class EventCreatorRecord(BaseModel):
    id: Optional[int] = None
    name: str
    email: Optional[str] = None
    profile_photo: Optional[str] = None


class EventRecord(BaseModel):
    id: int
    name: str
    event_date: Optional[datetime] = None
    start_time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    ticket_price: Optional[float] = None
    max_participants: Optional[int] = None
    registration_status: Optional[str] = None
    category: Optional[CategoryEnum] = None
    participants_count: int = 0
    available_slots: Optional[int] = None
    registration_start: Optional[datetime] = None
    registration_end: Optional[datetime] = None
    banner_url: Optional[str] = None
    optimized_banner_urls: Dict[str, str] = Field(default_factory=dict)
    contact_persons: List[Dict[str, Optional[str]]] = Field(default_factory=list)
    creator: Optional[EventCreatorRecord] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("event_date", "registration_start", "registration_end", mode="before")
    @classmethod
    def _parse_dates(cls, value):
        return parse_event_datetime(value)


class PrizeRecord(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    quantity: int
    category: Optional[CategoryEnum] = None
    event_id: Optional[int] = None
    event_name: Optional[str] = None
    image_url: Optional[str] = None
    remaining_quantity: Optional[int] = None
    won_count: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ParticipantRecord(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    institution: Optional[str] = None
    nik: Optional[str] = None
    registration_number: Optional[str] = None
    event_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _pick(payload: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def event_from_payload(payload: Dict[str, Any]) -> EventRecord:
    creator_raw = payload.get("creator")
    creator = None
    if isinstance(creator_raw, dict) and creator_raw.get("name"):
        creator = EventCreatorRecord(
            id=creator_raw.get("id"),
            name=creator_raw["name"],
            email=creator_raw.get("email"),
            profile_photo=_pick(creator_raw, "profilePhoto", "profile_photo"),
        )

    contact_persons = []
    for index in (1, 2):
        name = _pick(payload, f"contactPerson{index}Name", f"contact_person_{index}_name")
        phone = _pick(payload, f"contactPerson{index}Phone", f"contact_person_{index}_phone")
        if name or phone:
            contact_persons.append({"name": name, "phone": phone})

    return EventRecord(
        id=payload["id"],
        name=payload["name"],
        event_date=_pick(payload, "eventDate", "event_date"),
        start_time=_pick(payload, "startTime", "start_time"),
        location=payload.get("location"),
        description=payload.get("description"),
        ticket_price=_pick(payload, "ticketPrice", "ticket_price"),
        max_participants=_pick(payload, "maxParticipants", "max_participants"),
        registration_status=_pick(payload, "registrationStatus", "registration_status"),
        category=payload.get("category"),
        participants_count=_pick(payload, "participantsCount", "participants_count") or 0,
        available_slots=_pick(payload, "availableSlots", "available_slots"),
        registration_start=_pick(payload, "registrationStart", "registration_start"),
        registration_end=_pick(payload, "registrationEnd", "registration_end"),
        banner_url=_pick(payload, "bannerUrl", "banner_url"),
        optimized_banner_urls={
            size: url
            for size, url in (_pick(payload, "optimizedBannerUrls", "optimized_banner_urls") or {}).items()
            if url
        },
        contact_persons=contact_persons,
        creator=creator,
        created_at=_pick(payload, "createdAt", "created_at"),
        updated_at=_pick(payload, "updatedAt", "updated_at"),
    )


def prize_from_payload(payload: Dict[str, Any]) -> PrizeRecord:
    event_raw = payload.get("event")
    return PrizeRecord(
        id=_pick(payload, "id", "prizeId"),
        name=_pick(payload, "name", "prizeName", "nama_hadiah"),
        description=_pick(payload, "description", "prizeDescription", "deskripsi"),
        quantity=_pick(payload, "quantity", "prizeQuantity", "jumlah"),
        category=_pick(payload, "category", "prizeCategory", "kategori"),
        event_id=_pick(payload, "eventId", "event_id"),
        event_name=event_raw.get("name") if isinstance(event_raw, dict) else None,
        image_url=_pick(payload, "imageUrl", "gambar_url"),
        remaining_quantity=_pick(payload, "remainingQuantity", "remaining_quantity"),
        won_count=_pick(payload, "wonCount", "winningsCount", "winnings_count"),
        created_at=_pick(payload, "createdAt", "created_at"),
        updated_at=_pick(payload, "updatedAt", "updated_at"),
    )


def participant_from_payload(payload: Dict[str, Any]) -> ParticipantRecord:
    return ParticipantRecord(
        id=payload["id"],
        name=payload["name"],
        email=payload.get("email"),
        phone_number=_pick(payload, "phoneNumber", "phone_number"),
        institution=payload.get("institution"),
        nik=payload.get("nik"),
        registration_number=_pick(payload, "registrationNumber", "registration_number"),
        event_id=_pick(payload, "eventId", "event_id"),
        created_at=_pick(payload, "createdAt", "created_at"),
        updated_at=_pick(payload, "updatedAt", "updated_at"),
    )
