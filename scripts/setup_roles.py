import sys
import os

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from app import create_app
from app.services import RoleService


def setup_roles():
    app = create_app()
    with app.app_context():
        created = RoleService.seed_team_roles()
        print(f"Created roles: {[role.value for role in created] or 'none'}")
        print("Roles setup completed!")


if __name__ == "__main__":
    setup_roles()
