"""
Recalculate registered_count for every tournament from the registrations table.
Run with: python3 -m scripts.recount_slots
"""
from db import SessionLocal
from api.crud.tournament_crud import reconcile_counts


def recount_slots():
    db = SessionLocal()
    try:
        corrections = reconcile_counts(db)
        if not corrections:
            print("✅ All slot counts are correct")
            return
        print(f"✅ Corrected {len(corrections)} tournament(s)")
        for tournament, stored, actual in corrections:
            print(f"  {tournament.game_type.value}/{tournament.tournament_type.value}: {stored} -> {actual}")
    except Exception as e:
        print(f"❌ Error: {e}")
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":
    print("Recounting tournament slots...")
    recount_slots()
