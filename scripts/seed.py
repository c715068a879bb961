#!/usr/bin/env python3
"""Seed a development database with an admin, a demo article and a thread.

Usage:
    python scripts/seed.py

Reads the same settings as the API (DATABASE__URL etc.). Safe to re-run:
it stops early when the admin account already exists.
"""

import asyncio
import sys

import logfire

from quill.config import Settings
from quill.domain.repository import VoteRepository
from quill.domain.service import NodeService, UserService
from quill.domain.value import Role, VoteDirection
from quill.util.di.container import create_container
from quill.util.observability import configure_logfire

ADMIN_EMAIL = "admin@quill.local"


async def seed() -> None:
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            node_service = await request_container.get(NodeService)
            vote_repository = await request_container.get(VoteRepository)

            if await user_service.is_taken(ADMIN_EMAIL):
                logfire.info("Seed data already present, skipping")
                return

            admin = await user_service.create_user(
                email=ADMIN_EMAIL,
                username="admin",
                password="changeme",
                name="Quill",
                last_name="Admin",
                role=Role.ADMIN,
            )
            reader = await user_service.create_user(
                email="reader@quill.local", username="reader", password="changeme"
            )

            article = await node_service.create_article(
                author_id=admin.id,
                author_username=admin.username,
                title="Welcome to Quill",
                content="This is the first article. Reply below to try threads.",
            )
            comment = await node_service.create_comment(
                author_id=reader.id,
                author_username=reader.username,
                parent_id=article.id,
                content="Hello from the reader account!",
            )

            # Set votes directly so seeding does not fan out notifications
            await vote_repository.add(article.id, reader.id, VoteDirection.UP)
            await vote_repository.add(comment.id, admin.id, VoteDirection.UP)

            logfire.info(
                "Seed data created",
                admin_id=str(admin.id),
                article_id=str(article.id),
                comment_id=str(comment.id),
            )
    finally:
        await container.close()


def main() -> int:
    """Seed the database and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(seed())
        return 0
    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
