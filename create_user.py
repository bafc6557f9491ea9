"""
Create a user account from the command line.

Run this from the backend root:

    (.venv) python create_user.py --username alice --email alice@example.com --password secret1

It goes through the same UserService as the API, so duplicate usernames
and emails are rejected the same way.
"""

import argparse
import getpass
import sys

from pydantic import ValidationError

from expense_tracker.db.init_db import init_db
from expense_tracker.db.session import SessionLocal
from expense_tracker.repositories.user_repository import UserRepository
from expense_tracker.schemas.user import UserCreate
from expense_tracker.services.user_service import DuplicateUserError, UserService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create an Expense Tracker user")
    parser.add_argument("--username", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--first-name", dest="first_name")
    parser.add_argument("--last-name", dest="last_name")
    parser.add_argument("--password", help="Prompted for when omitted")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    password = args.password or getpass.getpass("Password: ")

    try:
        request = UserCreate(
            username=args.username,
            email=args.email,
            first_name=args.first_name,
            last_name=args.last_name,
            password=password,
        )
    except ValidationError as exc:
        print(f"[ERROR] Invalid user data:\n{exc}", file=sys.stderr)
        return 2

    init_db()
    db = SessionLocal()
    try:
        user = UserService(UserRepository(db)).create_user(request)
    except DuplicateUserError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"[INFO] Created user {user.username} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
