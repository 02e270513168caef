"""
Job Profile Service admin CLI.

Database bootstrap, development users/tokens, and storage housekeeping
reports. Nothing here deletes uploaded files.
"""

import argparse
import json

from dotenv import load_dotenv

from core.config import get_settings
from core.db import db
from core.logging import configure_logging
from core.models import User
from core.repositories import ProfileRepository, SkillRepository, UserRepository
from core.security import create_access_token
from core.storage import BlobStore

load_dotenv()


def _init_database():
    """Initialize the database connection and create tables."""
    settings = get_settings()
    if not db.is_initialized:
        db.initialize(settings.database_url)
    db.create_all_tables()


def _blob_store() -> BlobStore:
    return BlobStore(get_settings().upload_root_path)


def cmd_init_db(args):
    """Create tables and upload directories."""
    _init_database()
    store = _blob_store()
    store.initialize()
    print(f"Database ready; uploads at {store.root}")


def cmd_create_user(args):
    """Create a user record (normally done by the auth service)."""
    _init_database()
    with db.session() as session:
        repo = UserRepository(session)
        if repo.get_by_email(args.email):
            print(f"User already exists: {args.email}")
            return 1
        user = repo.create(email=args.email, full_name=args.full_name, phone_number=args.phone)
        print(f"Created user {user.id} <{user.email}>")
    return 0


def cmd_issue_token(args):
    """Sign a development bearer token for an existing user."""
    _init_database()
    with db.session() as session:
        user: User | None = UserRepository(session).get_by_email(args.email)
        if user is None:
            print(f"No user with email {args.email}")
            return 1
        print(create_access_token({"sub": str(user.id)}, expires_minutes=args.minutes))
    return 0


def cmd_list_skills(args):
    """Print canonical skill names."""
    _init_database()
    with db.session() as session:
        names = SkillRepository(session).list_names()
    if args.format == "json":
        print(json.dumps(names, indent=2))
    else:
        for name in names:
            print(name)
        print(f"\n{len(names)} skills")


def cmd_orphaned_assets(args):
    """Report stored files that no profile references (read-only)."""
    _init_database()
    with db.session() as session:
        referenced = ProfileRepository(session).referenced_asset_urls()
    orphans = [url for url in _blob_store().iter_retrieval_paths() if url not in referenced]
    if args.format == "json":
        print(json.dumps(orphans, indent=2))
    else:
        for url in orphans:
            print(url)
        print(f"\n{len(orphans)} unreferenced files")


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI interface."""
    configure_logging(level=get_settings().log_level)

    parser = argparse.ArgumentParser(
        description="Job Profile Service - administration commands"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create tables and upload directories")

    create_user_parser = subparsers.add_parser("create-user", help="Create a user")
    create_user_parser.add_argument("--email", required=True, help="Login email")
    create_user_parser.add_argument("--full-name", help="Display name")
    create_user_parser.add_argument("--phone", help="Phone number")

    token_parser = subparsers.add_parser("issue-token", help="Sign a development access token")
    token_parser.add_argument("--email", required=True, help="User email")
    token_parser.add_argument("--minutes", type=int, help="Token lifetime in minutes")

    skills_parser = subparsers.add_parser("list-skills", help="List canonical skills")
    skills_parser.add_argument("--format", choices=["text", "json"], default="text")

    orphans_parser = subparsers.add_parser(
        "orphaned-assets", help="List uploaded files no profile references"
    )
    orphans_parser.add_argument("--format", choices=["text", "json"], default="text")

    args = parser.parse_args(argv)

    commands = {
        "init-db": cmd_init_db,
        "create-user": cmd_create_user,
        "issue-token": cmd_issue_token,
        "list-skills": cmd_list_skills,
        "orphaned-assets": cmd_orphaned_assets,
    }

    if args.command in commands:
        return commands[args.command](args) or 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
