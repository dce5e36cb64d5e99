"""
Create portal clients. Clients cannot sign up through the API; staff add them here.

Usage:
    python -m cleansync.scripts.seed_clients --name "Jane Doe" --pin 1234 --email jane@example.com
"""

import argparse
import logging
import sys

from ..database import Base, SessionLocal, engine
from ..domain.clients.service import ClientService

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def seed_client(name: str, pin: str, email: str):
    Base.metadata.create_all(bind=engine, checkfirst=True)

    db = SessionLocal()
    try:
        return ClientService(db).create_client(name=name, pin=pin, email=email)
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a CleanSync portal client")
    parser.add_argument("--name", required=True)
    parser.add_argument("--pin", required=True, help="4-digit login PIN, unique per client")
    parser.add_argument("--email", required=True)
    args = parser.parse_args(argv)

    try:
        client = seed_client(args.name, args.pin, args.email)
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info(f"✅ Client {client.id} created: {client.name} <{client.email}>")
    return 0


if __name__ == "__main__":
    sys.exit(main())
