from sqlalchemy import inspect

from portal.database import engine, DATABASE_URL

def check_db():
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    if not tables:
        print(f"No tables found in {DATABASE_URL}. Start the API once or run scripts/seed_demo.py.")
        return

    print(f"Tables in {DATABASE_URL}:")
    for table in tables:
        print(f" - {table}")
        for col in inspector.get_columns(table):
            print(f"   * {col['name']} ({col['type']})")

if __name__ == "__main__":
    check_db()
