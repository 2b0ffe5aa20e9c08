"""
Create a user out of band (e.g. the first admin). Run from project root:
  python -m aione.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m aione.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from aione.core.database import SessionLocal
from aione.core.errors import AppError
from aione.models.user import ROLES
from aione.services.auth import register

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an AIOne user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="viewer", choices=list(ROLES))
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        result = register(
            db,
            username=args.username,
            email=args.email,
            password=args.password,
            role=args.role,
        )
    except AppError as e:
        logger.error("Could not create user: %s", e.message)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' with role '%s'.", result.user.username, result.user.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
