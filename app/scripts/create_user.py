"""
Create a panel user from the host shell (e.g. the first administrator). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--template NAME] [--fullname NAME] [--email ADDR]
Example:
  python -m app.scripts.create_user admin your-secure-password --template Administrator
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.security import USERNAME_MAX_LEN, hash_password
from app.models import User
from app.services.permissions import find_template_id_by_name


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a panel user with a named permission template.")
    parser.add_argument("username", help="Username (1-64 chars)")
    parser.add_argument("password", help="Password")
    parser.add_argument("--template", default="Administrator", help="Permission template name")
    parser.add_argument("--fullname", default="", help="Full name")
    parser.add_argument("--email", default="", help="Email address")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        template_id = find_template_id_by_name(db, args.template)
        if template_id is None:
            print(f"Permission template '{args.template}' does not exist.", file=sys.stderr)
            return 1
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user = User(
            username=username,
            password=hash_password(args.password, settings.PASSWORD_COST),
            fullname=args.fullname.strip(),
            email=args.email.strip(),
            description="Created from the command line",
            perm_templ=template_id,
            active=True,
            use_ldap=False,
            auth_method="sql",
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with template '{args.template}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
