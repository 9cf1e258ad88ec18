#!/usr/bin/env python3
"""
Reset database: keep admins and tournaments, clear registrations and activity logs
Run with: python3 -m scripts.reset_database
"""
from db import SessionLocal
from models.tournament import Tournament
from models.registration import Registration
from models.activity_log import ActivityLog


def reset_database():
    db = SessionLocal()
    try:
        registrations = db.query(Registration).delete(synchronize_session=False)
        logs = db.query(ActivityLog).delete(synchronize_session=False)
        db.query(Tournament).update({Tournament.registered_count: 0}, synchronize_session=False)
        db.commit()

        print(f"Registrations deleted: {registrations}")
        print(f"Activity logs deleted: {logs}")
        print("✅ Database reset complete!")
        print("📊 Admins and tournaments preserved, all slot counts set to 0")
    except Exception as e:
        db.rollback()
        print(f"❌ Error resetting database: {e}")
    finally:
        db.close()


if __name__ == "__main__":
    print("🔄 Resetting database...")
    print("⚠️  This will delete ALL registrations and activity logs but keep admins and tournaments")

    confirm = input("Continue? (y/N): ")
    if confirm.lower() == 'y':
        reset_database()
    else:
        print("❌ Reset cancelled")
