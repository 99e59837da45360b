from datetime import datetime
from pathlib import Path
import os
import sys

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_TIMEZONE", "Asia/Jakarta")

ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from fastapi.testclient import TestClient  # noqa: E402

from auth import get_password_hash  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402
from models import Admin, AdminRole, Category, Event, Participant, Prize, Winning  # noqa: E402
from server import app  # noqa: E402


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    return TestClient(app)


@pytest.fixture()
def creator(db):
    admin = Admin(
        email="panitia@example.com",
        hashed_password=get_password_hash("rahasia123"),
        name="Panitia Utama",
        role=AdminRole.ADMIN,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture()
def event(db, creator):
    row = Event(
        name="Festival Rakyat",
        location="Buntok",
        event_date=datetime(2024, 8, 17, 9, 0),
        category=Category.UTAMA,
        creator_id=creator.id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def add_participant(db, event, name, registration_number, nik="3201012345670001"):
    participant = Participant(
        event_id=event.id,
        name=name,
        nik=nik,
        phone_number="081234567890",
        institution="Dinas Kominfo",
        email=f"{name.lower()}@example.com",
        registration_number=registration_number,
    )
    db.add(participant)
    db.commit()
    db.refresh(participant)
    return participant


def add_prize(db, event, name, quantity, winners=(), category=Category.REGULER):
    prize = Prize(event_id=event.id, name=name, quantity=quantity, category=category)
    db.add(prize)
    db.commit()
    for participant in winners:
        db.add(Winning(prize_id=prize.id, participant_id=participant.id))
        db.commit()
    db.refresh(prize)
    return prize
