"""
Seed Admin User

Creates the first admin account directly, bypassing the approval flow.
Run this script once when setting up a new database.

Environment:
    SEED_ADMIN_EMAIL     (required)
    SEED_ADMIN_PASSWORD  (required)
    SEED_ADMIN_NAME      (default: "Administrator")
    SEED_ADMIN_PHONE     (default: "N/A")

Usage:
    SEED_ADMIN_EMAIL=... SEED_ADMIN_PASSWORD=... python scripts/seed_admin.py
"""

import asyncio
import os
import sys
from pathlib import Path

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mou_tracker.core.database import async_session_maker, close_db  # noqa: E402
from mou_tracker.core.security import hash_password  # noqa: E402
from mou_tracker.modules.admins.repository import AdminRepository  # noqa: E402


async def seed_admin() -> int:
    """Create the admin if it doesn't exist. Returns a process exit code."""
    email = os.environ.get("SEED_ADMIN_EMAIL", "").strip().lower()
    password = os.environ.get("SEED_ADMIN_PASSWORD", "")
    name = os.environ.get("SEED_ADMIN_NAME", "Administrator").strip()
    phone = os.environ.get("SEED_ADMIN_PHONE", "N/A").strip()

    if not email or not password:
        print("SEED_ADMIN_EMAIL and SEED_ADMIN_PASSWORD must be set")
        return 1

    try:
        async with async_session_maker() as db:
            existing = await AdminRepository.get_by_email(db, email)
            if existing:
                print(f"Admin already exists: {email}")
                print(f"  ID: {existing.id}")
                return 0

            admin = await AdminRepository.create(
                db,
                name=name,
                email=email,
                phone_number=phone,
                password_hash=hash_password(password),
            )
            await db.commit()

            print("Admin created successfully!")
            print(f"  Email: {admin.email}")
            print(f"  Name: {admin.name}")
            print(f"  ID: {admin.id}")
    finally:
        await close_db()

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(seed_admin()))
