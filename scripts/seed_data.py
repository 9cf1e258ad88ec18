"""
Seed the default admin account and the six tournament variants.
Safe to run repeatedly: existing rows are left alone.
Run with: python3 -m scripts.seed_data
"""
from db import SessionLocal
from core.config import settings
from api.crud.admin_crud import seed_default_admin
from api.crud.tournament_crud import seed_tournaments
from scripts.create_tables import create_tables


def seed_data():
    create_tables()
    db = SessionLocal()
    try:
        admin = seed_default_admin(db, settings.admin_username, settings.admin_password)
        tournaments = seed_tournaments(db, settings.default_qr_code_url)
    finally:
        db.close()

    if admin:
        print(f"👤 Admin '{settings.admin_username}' created")
    else:
        print(f"👤 Admin '{settings.admin_username}' already exists")
    print(f"🎯 {len(tournaments)} tournament(s) created")


if __name__ == "__main__":
    print("🌱 Seeding database...")
    seed_data()
    print("✅ Done")
