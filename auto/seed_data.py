#!/usr/bin/env python3
"""
Seed Demo Data Script.

Signup and blog authoring live in other services, so a fresh database has
nobody to follow and nothing to like. This script creates demo users with a
few blogs each and prints a bearer token per user for trying the API.

Usage:
    uv run python auto/seed_data.py
    uv run python auto/seed_data.py --users 5 --blogs 3 --create-tables

Environment Variables:
    DATABASE_URL: Target database (default from app settings)
    SECRET_KEY: Must match the running API for the printed tokens to verify
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from dataclasses import dataclass
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path
from time import perf_counter

from rich import print as rprint
from rich.table import Table

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from app.db.database import close_db, init_db, transaction  # noqa: E402
from app.errors.database import DuplicateEntryError  # noqa: E402
from app.managers.token_manager import create_access_token  # noqa: E402
from app.repositories import BlogRepository, UserRepository  # noqa: E402
from app.utils.helpers import time_taken  # noqa: E402

TAGS = ("databases", "python", "travel", "design", "")


@dataclass(frozen=True)
class SeededUser:
    """
    A created demo user.

    Attributes
    ----------
    id : int
        Database id.
    username : str
        Username.
    blog_ids : list[int]
        Ids of the user's blogs; every other one is left as a draft.
    token : str
        Access token for the user.
    """

    id: int
    username: str
    blog_ids: list[int]
    token: str


def parse_args() -> Namespace:
    parser = ArgumentParser(
        description="Create demo users and blogs",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--users", type=int, default=3, help="Number of users (default: 3)")
    parser.add_argument("--blogs", type=int, default=4, help="Blogs per user (default: 4)")
    parser.add_argument(
        "--prefix",
        default="demo",
        help="Username prefix, e.g. demo -> demo1, demo2 (default: demo)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first instead of relying on alembic",
    )
    return parser.parse_args()


async def seed(args: Namespace) -> list[SeededUser]:
    """
    Create the demo users and their blogs in one transaction.

    Parameters
    ----------
    args : Namespace
        Parsed command line arguments.

    Returns
    -------
    list[SeededUser]
        Created users with their blog ids and tokens.

    Raises
    ------
    DuplicateEntryError
        If a demo username or email is already taken.
    """
    seeded: list[SeededUser] = []
    async with transaction() as session:
        users = UserRepository(session)
        blogs = BlogRepository(session)

        for index in range(1, args.users + 1):
            username = f"{args.prefix}{index}"
            user = await users.create(username=username, email=f"{username}@example.com")
            user_id = user.id or 0

            blog_ids: list[int] = []
            for number in range(1, args.blogs + 1):
                blog = await blogs.create(
                    author_id=user_id,
                    title=f"{username}'s post #{number}",
                    content=f"Demo content number {number} written by {username}.",
                    tag=TAGS[number % len(TAGS)],
                    published=number % 2 == 1,
                )
                blog_ids.append(blog.id or 0)

            seeded.append(
                SeededUser(
                    id=user_id,
                    username=username,
                    blog_ids=blog_ids,
                    token=create_access_token(user_id, username),
                ),
            )
    return seeded


def display(seeded: list[SeededUser]) -> None:
    table = Table(title="Seeded users")
    table.add_column("id", justify="right")
    table.add_column("username")
    table.add_column("blogs (odd = published)")
    table.add_column("bearer token", overflow="fold")
    for user in seeded:
        table.add_row(
            str(user.id),
            user.username,
            ", ".join(str(blog_id) for blog_id in user.blog_ids),
            user.token,
        )
    rprint(table)
    if seeded:
        first = seeded[0]
        rprint("\n[b]Try it:[/b]")
        rprint(
            "  curl -X POST 'http://localhost:8000/blog/like/blogLikes/"
            f"{first.blog_ids[0] if first.blog_ids else 1}' \\",
        )
        rprint(f"    -H 'Authorization: Bearer {first.token}'")


async def main() -> int:
    args = parse_args()
    start = perf_counter()
    try:
        if args.create_tables:
            await init_db()
        seeded = await seed(args)
    except DuplicateEntryError as e:
        rprint(f"❌ [b red]Seeding failed:[/b red] {e}")
        rprint("   Use another --prefix or clear the demo users first.")
        return 1
    finally:
        await close_db()

    rprint(f"✅ [b green]Created {len(seeded)} users[/b green] in {time_taken(start)}")
    display(seeded)
    return 0


if __name__ == "__main__":
    sys_exit(asyncio_run(main()))
