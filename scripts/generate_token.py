"""Print a signed access token for local testing.

Usage:
  python scripts/generate_token.py
  python scripts/generate_token.py --subject someone --expires-in 3600

The secret and algorithm come from JWT_SECRET / JWT_ALG, like the API.
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "api"))

from auth.security import build_access_token
from core.settings import Settings

DEFAULT_SUBJECT = "test-subject-id"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--subject", default=DEFAULT_SUBJECT, help="Value of the `sub` claim")
    parser.add_argument("--name", default="Test User", help="Value of the `name` claim")
    parser.add_argument("--expires-in", type=int, default=24 * 60 * 60, help="Lifetime in seconds")
    args = parser.parse_args()

    settings = Settings.from_env()
    token = build_access_token(
        subject=args.subject,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in_s=args.expires_in,
        extra_claims={"name": args.name},
    )
    print(token)


if __name__ == "__main__":
    main()
