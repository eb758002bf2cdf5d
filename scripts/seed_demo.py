#!/usr/bin/env python3
"""Seed a demo donor database for local development.

Usage:
    python scripts/seed_demo.py
    python scripts/seed_demo.py --admin-email admin@example.org --admin-password changeme123

Connects using DATABASE_URL from environment or .env file, creates missing
tables, then inserts staff users, donors (some deliberately incomplete or
duplicated so the data-health report has something to flag), interactions,
opportunities and campaigns.
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal

# Ensure project root is on sys.path so we can import src.fundrazor
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv  # noqa: E402

# Load .env from project root
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

DEMO_PERSONS = [
    {"first_name": "Margaret", "last_name": "Chen", "primary_email": "mchen@example.org",
     "primary_phone": "(617) 555-0101", "organization_name": "Chen Family Foundation", "wealth_band": "$1M+"},
    {"first_name": "David", "last_name": "Okafor", "primary_email": "dokafor@example.org",
     "primary_phone": "(617) 555-0102", "wealth_band": "$250K-$1M"},
    {"first_name": "Elena", "last_name": "Vasquez", "primary_email": "evasquez@example.org",
     "primary_phone": None, "organization_name": "Vasquez & Partners"},
    {"first_name": "Robert", "last_name": "Lindqvist", "primary_email": None,
     "primary_phone": "(617) 555-0104"},
    {"first_name": "Aisha", "last_name": "Rahman", "primary_email": "arahman@example.org",
     "primary_phone": "(617) 555-0105", "organization_name": "Rahman Trust"},
    # Same donor imported twice from different systems
    {"first_name": "James", "last_name": "Whitfield", "primary_email": "jwhitfield@example.org",
     "primary_phone": "(617) 555-0106", "wealth_band": "$100K-$250K", "source_system": "salesforce"},
    {"first_name": "james", "last_name": "whitfield", "primary_email": None,
     "primary_phone": "(617) 555-0106", "source_system": "mailchimp"},
]


async def seed(admin_email: str | None, admin_password: str | None) -> None:
    from src.fundrazor.campaigns.repository import CampaignRepository
    from src.fundrazor.core.database import close_db, get_session, init_db
    from src.fundrazor.core.security import hash_password
    from src.fundrazor.interactions.repository import InteractionRepository
    from src.fundrazor.people.repository import PeopleRepository
    from src.fundrazor.people.schemas import OpportunityStage
    from src.fundrazor.users.repository import UserRepository

    await init_db()

    users = UserRepository(session_factory=get_session)
    people = PeopleRepository(session_factory=get_session)
    interactions = InteractionRepository(session_factory=get_session)
    campaigns = CampaignRepository(session_factory=get_session)

    owner_id = None
    if admin_email and admin_password:
        existing = await users.get_by_email(admin_email)
        if existing is None:
            admin = await users.create_user({
                "email": admin_email.lower(),
                "first_name": "Demo",
                "last_name": "Admin",
                "role": "ADMIN",
                "hashed_password": hash_password(admin_password),
            })
            owner_id = admin.id
            print(f"Created admin user {admin.email} ({admin.id})")
        else:
            owner_id = existing.id
            print(f"Admin user {existing.email} already exists")

    now = datetime.now(timezone.utc)
    person_ids = []
    for values in DEMO_PERSONS:
        person = await people.create_person(values)
        person_ids.append(person.id)
    print(f"Created {len(person_ids)} persons")

    for offset, (person_id, kind) in enumerate(zip(person_ids, ["meeting", "call", "email_open", "event"])):
        await interactions.create_interaction({
            "person_id": person_id,
            "type": kind,
            "occurred_at": now - timedelta(days=3 + offset * 5),
            "owner_id": owner_id,
            "notes": f"Demo {kind.replace('_', ' ')}",
            "source": "seed",
        })
    print("Created interactions")

    await people.create_opportunity({
        "person_id": person_ids[0],
        "stage": OpportunityStage.ASK.value,
        "ask_amount": Decimal("250000"),
        "probability": 60,
        "owner_id": owner_id,
    })
    await people.create_opportunity({
        "person_id": person_ids[1],
        "stage": OpportunityStage.CULTIVATION.value,
        "ask_amount": Decimal("50000"),
    })
    print("Created opportunities")

    await campaigns.create_campaign({
        "name": "Annual Fund 2026",
        "type": "annual",
        "status": "active",
        "goal": Decimal("500000"),
        "raised": Decimal("212500"),
        "donor_count": 340,
        "total_gifts": 512,
        "owner_id": owner_id,
        "start_date": datetime(2026, 1, 1, tzinfo=timezone.utc),
        "end_date": datetime(2026, 12, 31, tzinfo=timezone.utc),
    })
    await campaigns.create_campaign({
        "name": "Holiday Giving Campaign",
        "type": "special_event",
        "status": "planning",
        "goal": Decimal("75000"),
        "owner_id": owner_id,
        "start_date": datetime(2026, 11, 1, tzinfo=timezone.utc),
        "end_date": datetime(2026, 12, 31, tzinfo=timezone.utc),
    })
    print("Created campaigns")

    await close_db()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed a demo FundRazor database")
    parser.add_argument("--admin-email", default=None, help="Create (or reuse) an admin user")
    parser.add_argument("--admin-password", default=None, help="Password for the admin user")
    args = parser.parse_args()

    asyncio.run(seed(args.admin_email, args.admin_password))


if __name__ == "__main__":
    main()
