#!/usr/bin/env python3
"""Create an admin account, or promote and reset an existing one."""
from __future__ import annotations

import argparse
import asyncio
import getpass
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.exceptions import AppError
from app.db.session import dispose_engine, get_session, init_models
from app.models.user import UserRole
from app.services.users import create_user, get_user_by_email, set_admin

logger = logging.getLogger("create_admin")


async def ensure_admin(username: str, email: str, password: str) -> None:
    await init_models()
    try:
        async with get_session() as session:
            existing = await get_user_by_email(session, email)
            if existing:
                await set_admin(session, existing, password)
                logger.info("Updated %s to admin", existing.email)
            else:
                user = await create_user(session, username, email, password, role=UserRole.ADMIN)
                logger.info("Created admin %s (id=%s)", user.email, user.id)
            await session.commit()
    finally:
        await dispose_engine()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--username", default="admin")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", help="prompted for when omitted")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    password = args.password or getpass.getpass("Admin password: ")
    if len(password) < 8:
        logger.error("Password must be at least 8 characters")
        return 1
    try:
        asyncio.run(ensure_admin(args.username, args.email, password))
    except AppError as exc:
        logger.error("Could not create admin: %s", exc.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
