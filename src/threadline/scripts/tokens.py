# src/threadline/scripts/tokens.py
"""Issue signed access tokens for local development and manual testing.

Example:
    python -m threadline.scripts.tokens alice@example.com --name Alice
"""

import argparse

from threadline.core.security import create_access_token


def main(argv: list[str] | None = None) -> None:
    """Print a bearer token asserting the given email."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Caller email the token asserts")
    parser.add_argument("--name", default=None, help="Display name claim")
    parser.add_argument("--picture", default=None, help="Avatar URL claim")
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Lifetime in minutes (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args(argv)
    print(create_access_token(args.email, args.name, args.picture, args.minutes))


if __name__ == "__main__":
    main()
