"""Bootstrap the first administrator out of band.

``POST /api/auth/create-admin`` needs an existing admin's token, so the very
first account has to be written straight to the database.

Usage::

    python -m scripts.seed_admin admin@looncamp.com 'a-strong-password'
    python -m scripts.seed_admin --print-hash 'a-strong-password'
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import looncamp.models  # noqa: F401  (registers every table on Base.metadata)
from looncamp.auth.passwords import hash_password
from looncamp.database import Base, async_session_factory, engine
from looncamp.errors import ValidationError
from looncamp.services import admin_service


async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_admin(email: str, password: str) -> int:
    try:
        await create_tables()
        async with async_session_factory() as session:
            try:
                admin = await admin_service.create_admin(session, email, password)
            except ValidationError as exc:
                print(f"❌ {exc.message}")
                return 1
            await session.commit()
    finally:
        await engine.dispose()

    print(f"✅ Created admin: {admin.email} (id={admin.id})")
    return 0


def print_hash(password: str) -> None:
    hashed = hash_password(password)
    print("=" * 60)
    print("Password hash generated")
    print("=" * 60)
    print(f"Hash: {hashed}")
    print()
    print("Use this hash in your database:")
    print(f"INSERT INTO admins (id, email, password_hash) VALUES ('<uuid>', 'admin@looncamp.com', '{hashed}');")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--print-hash", action="store_true", help="only print a bcrypt hash for PASSWORD")
    parser.add_argument("args", nargs="+", metavar="EMAIL PASSWORD")
    options = parser.parse_args(argv)

    if options.print_hash:
        print_hash(options.args[-1])
        return 0
    if len(options.args) != 2:
        parser.error("expected EMAIL and PASSWORD")
    return asyncio.run(seed_admin(*options.args))


if __name__ == "__main__":
    sys.exit(main())
