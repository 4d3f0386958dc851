"""Shelfwise database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Create an administrator and the treasury account
"""

import argparse
import sys


def _domain():
    from shared.domain import load_elements, shelfwise

    load_elements()
    shelfwise.init(traverse=False)
    return shelfwise


def setup_database():
    """Create the schema for every bounded context."""
    shelfwise = _domain()
    with shelfwise.domain_context():
        print("Creating shelfwise database schema...")
        shelfwise.setup_database()
    print("Done.")


def drop_database():
    """Drop the schema for every bounded context."""
    shelfwise = _domain()
    with shelfwise.domain_context():
        print("Dropping shelfwise database schema...")
        shelfwise.drop_database()
    print("Done.")


def seed(username: str, email: str):
    """Register an administrator and open the treasury account they own.

    Prints the account id to export as TREASURY_ACCOUNT_ID.
    """
    from identity.user.registration import RegisterUser
    from ledger.account.opening import OpenAccount

    shelfwise = _domain()
    with shelfwise.domain_context():
        shelfwise.setup_database()
        admin = shelfwise.process(
            RegisterUser(username=username, email=email, display_name="Administrator", role="admin"),
            asynchronous=False,
        )
        account = shelfwise.process(OpenAccount(owner_user_id=admin.id), asynchronous=False)

    print(f"Administrator: {admin.id}")
    print(f"Treasury account: {account.id} (balance {account.balance})")
    print(f"export TREASURY_ACCOUNT_ID={account.id}")


def main():
    parser = argparse.ArgumentParser(description="Shelfwise database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Create an administrator and the treasury account")
    seed_parser.add_argument("--username", default="admin")
    seed_parser.add_argument("--email", default="admin@shelfwise.example.com")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed(args.username, args.email)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
