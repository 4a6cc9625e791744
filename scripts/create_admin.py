#!/usr/bin/env python3
"""
Seed an admin account.

Usage:
    python scripts/create_admin.py admin@example.com "Jane Admin"
    python scripts/create_admin.py admin@example.com "Jane Admin" --role superadmin

The password is read from ADMIN_PASSWORD or prompted for, and stored as a bcrypt hash.

Environment Variables:
    DATABASE_URL: Target database
    ADMIN_PASSWORD: Password for the new admin (optional)
"""

import argparse
import asyncio
import getpass
import os
import sys

import dotenv
from pydantic import ValidationError

dotenv.load_dotenv()


async def create_admin(email: str, name: str | None, password: str, role: str) -> str:
    """Insert the admin and return its id."""
    from fitness_server.core.exceptions import ConflictException
    from fitness_server.database import AsyncSessionLocal, engine
    from fitness_server.schemas.admin import AdminCreate
    from fitness_server.services.admin_service import AdminService

    try:
        admin_data = AdminCreate(email=email, name=name, password=password, role=role)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        async with AsyncSessionLocal() as session:
            result = await AdminService.create_admin(session, admin_data)
    except ConflictException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        await engine.dispose()

    return str(result.inserted_id)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("email", help="Admin email (login name)")
    parser.add_argument("name", nargs="?", default=None, help="Display name")
    parser.add_argument(
        "--role",
        type=str,
        default="admin",
        choices=["admin", "superadmin"],
        help="Admin role (default: admin)",
    )

    args = parser.parse_args()

    password = os.getenv("ADMIN_PASSWORD") or getpass.getpass("Password: ")

    admin_id = asyncio.run(create_admin(args.email, args.name, password, args.role))

    print("✅ Admin created successfully!")
    print(f"   ID:    {admin_id}")
    print(f"   Email: {args.email}")
    print(f"   Role:  {args.role}")


if __name__ == "__main__":
    main()
