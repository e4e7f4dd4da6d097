import argparse
import sys
import os

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from app import create_app
from app.services import UserService


def create_admin_user(external_id, email=None):
    app = create_app()
    with app.app_context():
        user, created = UserService.grant_admin(external_id, email=email)
        if created:
            print(f"Admin user {user.id} created for {external_id}")
        else:
            print(f"User {user.id} promoted to admin")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or promote an administrator")
    parser.add_argument("external_id", help="identity reference issued by the identity provider")
    parser.add_argument("--email", default=None)
    args = parser.parse_args()
    create_admin_user(args.external_id, email=args.email)
