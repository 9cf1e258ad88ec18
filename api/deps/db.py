from db import SessionLocal


def get_db():
    """
    FastAPI dependency: open a session for the request and close it afterwards.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
