"""
Admin account management: list admins, change a password or add an admin.
Run with: python3 -m scripts.change_admin_password
"""
from getpass import getpass
from db import SessionLocal
from models.admin import Admin
from api.crud.admin_crud import get_admin_by_username, create_admin, update_admin_password

MIN_PASSWORD_LENGTH = 8


def list_admins():
    db = SessionLocal()
    try:
        admins = db.query(Admin).order_by(Admin.username).all()
        if not admins:
            print("❌ No admins found")
            return
        print("\n📋 Admins:")
        print("-" * 60)
        for admin in admins:
            print(f"👑 {admin.username:20} | ID: {admin.id}")
        print("-" * 60)
    finally:
        db.close()


def _read_password():
    password = getpass("New password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return None
    if getpass("Repeat password: ") != password:
        print("❌ Passwords do not match")
        return None
    return password


def change_password(username: str):
    db = SessionLocal()
    try:
        admin = get_admin_by_username(db, username)
        if not admin:
            print(f"❌ Admin '{username}' not found")
            return
        password = _read_password()
        if password:
            update_admin_password(db, admin, password)
            print(f"✅ Password updated for '{username}'")
    finally:
        db.close()


def add_admin(username: str):
    db = SessionLocal()
    try:
        if get_admin_by_username(db, username):
            print(f"❌ Admin '{username}' already exists")
            return
        password = _read_password()
        if password:
            admin = create_admin(db, username, password)
            print(f"✅ Admin '{admin.username}' created")
    finally:
        db.close()


def main():
    print("=" * 60)
    print("🔧 Admin accounts")
    print("=" * 60)

    while True:
        print("\nChoose an action:")
        print("1. List admins")
        print("2. Change admin password")
        print("3. Add admin")
        print("4. Exit")

        choice = input("\nYour choice (1-4): ").strip()

        if choice == "1":
            list_admins()
        elif choice in ("2", "3"):
            username = input("\nUsername: ").strip()
            if not username:
                print("❌ Username cannot be empty")
            elif choice == "2":
                change_password(username)
            else:
                add_admin(username)
        elif choice == "4":
            break
        else:
            print("❌ Unknown choice")


if __name__ == "__main__":
    main()
