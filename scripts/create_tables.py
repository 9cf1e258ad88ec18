"""
Create all database tables
Run with: python3 -m scripts.create_tables
"""
from sqlalchemy import inspect
from db import Base, engine

# Import all models so they are registered with Base.metadata
from models.tournament import Tournament  # noqa: F401
from models.registration import Registration  # noqa: F401
from models.admin import Admin  # noqa: F401
from models.activity_log import ActivityLog  # noqa: F401


def create_tables():
    Base.metadata.create_all(bind=engine)
    return sorted(inspect(engine).get_table_names())


if __name__ == "__main__":
    print("🔨 Creating all tables...")
    tables = create_tables()
    print("✅ All tables created successfully!")
    print(f"\n📋 Tables ({len(tables)}):")
    for table in tables:
        print(f"   - {table}")
