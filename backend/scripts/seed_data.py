"""Seed the database with a demo administrator and sample listings.

Run inside Docker:
    docker compose exec backend python -m scripts.seed_data
"""

import asyncio
import sys
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select

from looncamp.auth.passwords import hash_password
from looncamp.database import Base, async_session_factory, engine
from looncamp.models.admin import Admin
from looncamp.models.property import Property, PropertyImage
from looncamp.schemas.property import PropertyCreate
from looncamp.services.property_repository import PropertyRepository

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

DEMO_ADMIN = {
    "email": "admin@looncamp.com",
    "password": "admin123",
}

PROPERTIES = [
    {
        "title": "Pawna Lake Camping",
        "description": (
            "Lakeside tents with a bonfire, barbecue dinner and a sunrise view over "
            "Pawna lake. Ideal for groups and weekend getaways from Pune and Mumbai."
        ),
        "category": "camping",
        "location": "Pawna Lake, Maharashtra",
        "price": "₹1,499",
        "price_note": "per person, dinner and breakfast included",
        "capacity": 4,
        "max_capacity": 6,
        "rating": 4.7,
        "is_top_selling": True,
        "contact": "+91 98765 43210",
        "amenities": ["tents", "bonfire", "barbecue", "washrooms", "parking"],
        "highlights": ["Lakeside location", "Live music on weekends"],
        "activities": ["Kayaking", "Stargazing", "Trekking to Tikona fort"],
        "policies": ["No loud music after 11 PM", "ID proof required at check-in"],
        "images": [
            "https://images.looncamp.com/pawna/tents.jpg",
            "https://images.looncamp.com/pawna/bonfire.jpg",
        ],
    },
    {
        "title": "Riverside Cottage",
        "description": "A two-room wooden cottage on the riverbank with a private sit-out.",
        "category": "cottage",
        "location": "Kolad, Maharashtra",
        "price": "₹4,999",
        "price_note": "per night for the cottage",
        "capacity": 4,
        "rating": 4.4,
        "amenities": ["wifi", "ac", "kitchenette", "private_sit_out"],
        "highlights": ["River view"],
        "activities": ["River rafting", "Zipline"],
        "policies": ["Pets allowed on request"],
        "images": ["https://images.looncamp.com/kolad/cottage.jpg"],
    },
    {
        "title": "Hilltop Villa with Pool",
        "description": "Four-bedroom villa with an infinity pool overlooking the Sahyadri range.",
        "category": "villa",
        "location": "Lonavala, Maharashtra",
        "price": "₹18,000",
        "price_note": "per night, up to 10 guests",
        "capacity": 10,
        "max_capacity": 14,
        "rating": 4.9,
        "check_in_time": "1:00 PM",
        "check_out_time": "10:00 AM",
        "amenities": ["private_pool", "wifi", "ac", "caretaker", "parking"],
        "highlights": ["Infinity pool", "Valley view"],
        "activities": ["Pool party", "Tiger point visit"],
        "policies": ["No outside DJs", "Security deposit at check-in"],
        "images": [
            "https://images.looncamp.com/lonavala/pool.jpg",
            "https://images.looncamp.com/lonavala/living.jpg",
            "https://images.looncamp.com/lonavala/bedroom.jpg",
        ],
    },
]


async def seed() -> None:
    """Populate the database with a demo admin and sample listings.

    Idempotent: seeded listings are matched by title and recreated.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        # ------------------------------------------------------------------
        # 1. Demo admin
        # ------------------------------------------------------------------
        result = await session.execute(select(Admin).where(Admin.email == DEMO_ADMIN["email"]))
        admin = result.scalar_one_or_none()
        if admin is None:
            admin = Admin(email=DEMO_ADMIN["email"], password_hash=hash_password(DEMO_ADMIN["password"]))
            session.add(admin)
            await session.flush()
            print(f"✅ Created demo admin: {admin.email} (id={admin.id})")
        else:
            print(f"⚠️  Demo admin '{admin.email}' already exists, keeping it")

        # ------------------------------------------------------------------
        # 2. Listings
        # ------------------------------------------------------------------
        titles = [p["title"] for p in PROPERTIES]
        stale = await session.execute(select(Property.id).where(Property.title.in_(titles)))
        stale_ids = list(stale.scalars().all())
        if stale_ids:
            await session.execute(delete(PropertyImage).where(PropertyImage.property_id.in_(stale_ids)))
            await session.execute(delete(Property).where(Property.id.in_(stale_ids)))
            await session.flush()

        repo = PropertyRepository(session)
        for prop_data in PROPERTIES:
            created = await repo.create(PropertyCreate(**prop_data))
            print(f"   🏕  {prop_data['title']} → /{created.slug}")

        await session.commit()

    await engine.dispose()

    print()
    print("=" * 60)
    print(f"   Admin:      1 ({DEMO_ADMIN['email']} / {DEMO_ADMIN['password']})")
    print(f"   Properties: {len(PROPERTIES)}")
    print("=" * 60)
    print("🎉 Done! You can now log in at /api/auth/login")


if __name__ == "__main__":
    asyncio.run(seed())
