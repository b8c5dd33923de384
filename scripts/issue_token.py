#!/usr/bin/env python3
"""Issue a signed JWT for a principal.

Usage:
    python scripts/issue_token.py alice
    curl -H "Authorization: Bearer $(python scripts/issue_token.py alice)" ...
"""

import argparse
import sys

import logfire

from council.config import Settings
from council.domain.service import JWTService
from council.domain.value import Principal


def main(argv: list[str] | None = None) -> int:
    """Print a token for the principal given on the command line."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("principal", help="Identity the token will carry")
    args = parser.parse_args(argv)

    # Keep stdout clean for shell substitution
    logfire.configure(send_to_logfire=False, console=False)

    settings = Settings()
    jwt_service = JWTService(settings.auth)
    print(jwt_service.create_token(Principal(args.principal)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
