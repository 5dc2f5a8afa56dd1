#!/usr/bin/env python3
"""
Reset a user's password in the users collection.

This script does not read or reveal existing passwords.  It stores a
new password hash for the user with the given email.

Usage:
    python reset_password.py --email user@example.com --password "NewStrongPass!234"
    python reset_password.py --data-dir /srv/home-service/data --email user@example.com

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import asyncio
import getpass
import sys
from typing import List, Optional

from home_service_api.app.core.config import settings
from home_service_api.app.core.store import StoreError, collection_path
from home_service_api.app.services.user_service import UserService


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset a home service user's password.")
    ap.add_argument("--email", required=True, help="User email to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    ap.add_argument("--data-dir", help="Directory holding users.json (defaults to DATA_DIR)")
    args = ap.parse_args(argv)

    if args.data_dir:
        settings.data_dir = args.data_dir

    users_file = collection_path("users")
    if not users_file.exists():
        print(f"[!] Users file not found: {users_file}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    try:
        asyncio.run(UserService.set_password(args.email, new_password))
    except ValueError:
        print(f"[!] No user found with email: {args.email}", file=sys.stderr)
        return 2
    except StoreError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1
    print(f"[+] Password updated for user: {args.email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
