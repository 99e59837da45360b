#!/usr/bin/env python3
"""
Create or update the super admin account.

Credentials come from ADMIN_EMAIL / ADMIN_PASSWORD / ADMIN_NAME. Running it
again with the same values leaves exactly one account with those values.

Usage:
  ADMIN_EMAIL=admin@example.com ADMIN_PASSWORD=secret python3 backend/scripts/seed_admin.py
  DEBUG=1 python3 backend/scripts/seed_admin.py   # print the traceback on failure
"""

import os
import sys
import traceback
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

load_dotenv(ROOT / ".env")

from sqlalchemy import func  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from auth import get_password_hash  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402
from models import Admin, AdminRole  # noqa: E402

DEFAULT_ADMIN_EMAIL = "admin@baritoselatankab.go.id"
DEFAULT_ADMIN_PASSWORD = "Admin123!@#"
DEFAULT_ADMIN_NAME = "Super Admin"
LOGIN_URL = os.environ.get("ADMIN_LOGIN_URL", "https://event.baritoselatankab.go.id/admin")


def load_admin_settings() -> Tuple[str, str, str]:
    return (
        os.environ.get("ADMIN_EMAIL") or DEFAULT_ADMIN_EMAIL,
        os.environ.get("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
        os.environ.get("ADMIN_NAME") or DEFAULT_ADMIN_NAME,
    )


def seed_admin(db: Session, email: str, password: str, name: str) -> Tuple[Admin, bool]:
    admin = db.query(Admin).filter(func.lower(Admin.email) == email.lower()).first()
    if admin:
        print(f"Admin with email {email} already exists")
        print("Updating password and details...")
        admin.hashed_password = get_password_hash(password)
        admin.email = email
        admin.name = name
        db.commit()
        db.refresh(admin)
        print("Admin updated successfully!")
        return admin, False

    admin = Admin(
        email=email,
        hashed_password=get_password_hash(password),
        name=name,
        role=AdminRole.SUPER_ADMIN,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    print("Super Admin created successfully!")
    return admin, True


def run(db: Session) -> Admin:
    email, password, name = load_admin_settings()
    print("Seeding Super Admin...")
    try:
        admin, _ = seed_admin(db, email, password, name)
    except Exception as exc:
        db.rollback()
        print("Error creating admin:")
        print(exc)
        if os.environ.get("DEBUG"):
            traceback.print_exc()
        raise

    print("")
    print("Admin Details:")
    print(f"   Email: {email}")
    print(f"   Password: {password}")
    print(f"   Name: {name}")
    print("")
    print(f"Login at: {LOGIN_URL}")
    return admin


def main() -> int:
    Base.metadata.create_all(bind=engine, tables=[Admin.__table__])
    db = SessionLocal()
    try:
        run(db)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
