# src/commentbox/scripts/tokens.py
"""Developer utility to create users and mint bearer tokens.

Registration and credential checks live outside this service; this script
stands in for them on local and test deployments.

Examples:
    python -m commentbox.scripts.tokens create-user "Ada" ada@example.com
    python -m commentbox.scripts.tokens issue-token 1
"""

from __future__ import annotations

import argparse
import sys

from sqlalchemy.orm import Session

from commentbox.api.v1.dependencies import create_access_token
from commentbox.db.session import SessionLocal, create_tables
from commentbox.models import User


def create_user(db: Session, name: str, email: str) -> User:
    """Persist a new user and return it."""
    user = User(name=name, email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def issue_token(db: Session, user_id: int) -> str:
    """Return a bearer token for an existing user.

    Raises:
        LookupError: If no user has the given id.
    """
    if db.get(User, user_id) is None:
        raise LookupError(f"User {user_id} does not exist")
    return create_access_token(user_id)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage development users and tokens")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create-user", help="Create a user and print a token")
    create.add_argument("name")
    create.add_argument("email")

    issue = subparsers.add_parser("issue-token", help="Print a token for an existing user")
    issue.add_argument("user_id", type=int)

    args = parser.parse_args(argv)

    create_tables()
    db = SessionLocal()
    try:
        if args.command == "create-user":
            user = create_user(db, args.name, args.email)
            print(f"user_id={user.id}")
            print(create_access_token(user.id))
        else:
            print(issue_token(db, args.user_id))
    except LookupError as exc:
        print(f"[tokens] ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
