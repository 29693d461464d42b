"""
Admin account bootstrap script.

Admins cannot self-register through the API; this creates one, or promotes
an existing account with the same email to admin.

Dependencies: backend.boundary.db, backend.core.security
System role: Operator tooling for account administration

Usage:
    python -m backend.scripts.create_admin --email admin@example.com --name "Site Admin"
"""

import argparse
import asyncio
import getpass

from backend.boundary.db.connection import dispose_engine, get_async_session_factory
from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.core.security import hash_password


async def create_admin(email: str, name: str, password: str) -> UserModel:
    """
    Create an admin account or promote the existing account for ``email``.

    Args:
        email: Login email
        name: Display name
        password: Plaintext password (at least 6 characters)

    Returns:
        UserModel: The admin account
    """
    if len(password) < 6:
        raise ValueError("Password must be at least 6 characters")

    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        user = await user_crud.get_by_email(session, email)
        if user:
            user.role = UserRole.ADMIN
            user.name = name
            user.password_hash = hash_password(password)
            await user_crud.save(session, user)
            print(f"Existing user {email} promoted to admin.")
        else:
            user = await user_crud.create(
                session,
                name=name,
                email=email.lower(),
                password_hash=hash_password(password),
                role=UserRole.ADMIN,
            )
            print(f"Admin user {email} created.")
        await session.commit()

    print(f"  ID: {user.id}")
    return user


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create or promote a LearnHub admin account")
    parser.add_argument("--email", required=True, help="Admin login email")
    parser.add_argument("--name", default="Administrator", help="Display name")
    parser.add_argument("--password", help="Password (prompted for when omitted)")
    return parser.parse_args()


async def _main(args: argparse.Namespace) -> None:
    password = args.password or getpass.getpass("Password: ")
    try:
        await create_admin(args.email, args.name, password)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(_main(_parse_args()))
