"""
Script to create the site owner's admin account.

Usage:
    python -m inquiry_desk.features.admin.utils.create_admin

This bypasses the login flow and should only be used for initial setup.
"""

import asyncio
import getpass
import sys

from inquiry_desk.features.admin.services.auth import AdminAuthService
from inquiry_desk.platform.db.session import get_db


async def main():
    print("=== Admin Creation Script ===")

    email = input("Enter admin email: ").strip()
    if not email:
        print("Error: Email is required")
        sys.exit(1)

    password = getpass.getpass("Enter admin password: ").strip()
    if not password:
        print("Error: Password is required")
        sys.exit(1)

    confirm_password = getpass.getpass("Confirm password: ").strip()
    if password != confirm_password:
        print("Error: Passwords do not match")
        sys.exit(1)

    async for db in get_db():
        try:
            admin = await AdminAuthService(db).create_admin(email, password)
        except ValueError as e:
            print(f"\nError creating admin: {e}")
            sys.exit(1)

        print("\nAdmin created successfully!")
        print(f"   Email: {admin.email}")
        print(f"   ID: {admin.id}")
        break


if __name__ == "__main__":
    asyncio.run(main())
