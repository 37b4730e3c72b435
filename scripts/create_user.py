#!/usr/bin/env python3
"""
Create a Vidhost user and print its API access token.

Usage:
    python scripts/create_user.py alice alice@example.com "Alice Example"
    python scripts/create_user.py alice alice@example.com "Alice" --avatar https://cdn.example.com/a.png
    python scripts/create_user.py alice --rotate
"""

import argparse
import sys

from vidhost.core.config import settings
from vidhost.core.database import SessionLocal, init_db
from vidhost.core.errors import ValidationError
from vidhost.core.logging import setup_logging
from vidhost.models import User
from vidhost.services.users import create_user, rotate_token


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Vidhost user or rotate its access token")
    parser.add_argument("username")
    parser.add_argument("email", nargs="?")
    parser.add_argument("full_name", nargs="?")
    parser.add_argument("--avatar", help="Avatar image URL")
    parser.add_argument("--rotate", action="store_true", help="Issue a new token for an existing user")
    args = parser.parse_args()

    setup_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        if args.rotate:
            user = db.query(User).filter(User.username == args.username.lower()).first()
            if user is None:
                print(f"No user named {args.username}", file=sys.stderr)
                return 1
            token = rotate_token(db, user)
            user_id = user.id
        else:
            if not args.email or not args.full_name:
                parser.error("email and full_name are required when creating a user")
            try:
                user, token = create_user(db, args.username, args.email, args.full_name, args.avatar)
                user_id = user.id
            except ValidationError as e:
                print(e.message, file=sys.stderr)
                return 1
    finally:
        db.close()

    print(f"user id:      {user_id}")
    print(f"access token: {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
