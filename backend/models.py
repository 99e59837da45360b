from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum, ForeignKey, Text, LargeBinary, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base
import enum


class AdminRole(enum.Enum):
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"
    MODERATOR = "moderator"


class Category(enum.Enum):
    UTAMA = "utama"
    REGULER = "reguler"


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(SQLEnum(AdminRole), default=AdminRole.ADMIN, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    created_events = relationship("Event", back_populates="creator")


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    event_date = Column(DateTime(timezone=True), nullable=True)
    category = Column(SQLEnum(Category), default=Category.REGULER, nullable=False)
    banner_data = Column(LargeBinary, nullable=True)
    banner_content_type = Column(String(50), nullable=True)
    creator_id = Column(Integer, ForeignKey("admins.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    creator = relationship("Admin", back_populates="created_events")
    participants = relationship("Participant", back_populates="event", cascade="all, delete-orphan")
    prizes = relationship("Prize", back_populates="event", cascade="all, delete-orphan")


class Participant(Base):
    __tablename__ = "participants"
    __table_args__ = (
        UniqueConstraint("event_id", "registration_number", name="uq_participants_event_registration"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    nik = Column(String(16), nullable=False)
    phone_number = Column(String(20), nullable=False)
    institution = Column(String(100), nullable=True)
    email = Column(String(100), nullable=True)
    registration_number = Column(String(30), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    event = relationship("Event", back_populates="participants")
    winnings = relationship("Winning", back_populates="participant", cascade="all, delete-orphan")

    @property
    def participant_number(self) -> str:
        return self.registration_number


class Prize(Base):
    __tablename__ = "prizes"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(SQLEnum(Category), default=Category.REGULER, nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    event = relationship("Event", back_populates="prizes")
    winnings = relationship(
        "Winning",
        back_populates="prize",
        cascade="all, delete-orphan",
        order_by="Winning.id",
    )

    @property
    def winners(self):
        # award order
        return [winning.participant for winning in self.winnings]

    @property
    def remaining_quantity(self) -> int:
        return max(self.quantity - len(self.winnings), 0)


class Winning(Base):
    __tablename__ = "winnings"
    __table_args__ = (
        UniqueConstraint("prize_id", "participant_id", name="uq_winnings_prize_participant"),
    )

    id = Column(Integer, primary_key=True, index=True)
    prize_id = Column(Integer, ForeignKey("prizes.id"), nullable=False, index=True)
    participant_id = Column(Integer, ForeignKey("participants.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    prize = relationship("Prize", back_populates="winnings")
    participant = relationship("Participant", back_populates="winnings")
