from portal.core.init_system import seed_default_data
from portal.database import SessionLocal, init_db

def seed():
    init_db()
    db = SessionLocal()
    try:
        if seed_default_data(db):
            print("Seeded demo users: hr@example.com (hr), student@example.com (student)")
        else:
            print("Users already exist. Nothing seeded.")
    finally:
        db.close()

if __name__ == "__main__":
    seed()
