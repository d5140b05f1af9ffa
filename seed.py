# seed.py
# Creates and fills the sample expenses dataset (development tooling only)
import random

from faker import Faker

from db import get_connection

PAYMENT_SOURCES = ["HDFC Savings", "ICICI Credit Card", "Cash Wallet", "Paytm Wallet"]
PAYMENT_METHODS = ["UPI", "Debit Card", "Credit Card", "Cash", "Net Banking"]
TAGS = ["food", "groceries", "travel", "rent", "utilities", "shopping", "health", "entertainment"]

SCHEMA_DDL = [
    """
    CREATE TABLE IF NOT EXISTS payment_sources (
        id INT AUTO_INCREMENT PRIMARY KEY,
        name VARCHAR(100) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS payment_methods (
        id INT AUTO_INCREMENT PRIMARY KEY,
        name VARCHAR(100) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expenses (
        id INT AUTO_INCREMENT PRIMARY KEY,
        amount DECIMAL(10, 2) NOT NULL,
        description VARCHAR(255),
        date DATE NOT NULL,
        tag VARCHAR(50),
        is_repayed TINYINT(1) NOT NULL DEFAULT 0,
        is_removed TINYINT(1) NOT NULL DEFAULT 0,
        source_id INT,
        method_id INT,
        FOREIGN KEY (source_id) REFERENCES payment_sources(id),
        FOREIGN KEY (method_id) REFERENCES payment_methods(id)
    )
    """,
]


def build_expense_rows(fake: Faker, source_ids, method_ids, count: int = 200):
    """Random expense rows over the last year, as INSERT parameter tuples."""
    rows = []
    for _ in range(count):
        tag = random.choice(TAGS)
        rows.append((
            round(random.uniform(50, 15000), 2),
            f"{tag.title()} - {fake.company()}",
            fake.date_between(start_date="-1y", end_date="today"),
            tag,
            random.choice([0, 0, 0, 1]),   # ~25% repaid
            random.choice([0] * 19 + [1]),  # ~5% soft-removed
            random.choice(source_ids),
            random.choice(method_ids),
        ))
    return rows


def seed_database(conn, fake: Faker = None, count: int = 200):
    fake = fake or Faker("en_IN")
    cursor = conn.cursor()
    try:
        for ddl in SCHEMA_DDL:
            cursor.execute(ddl)

        # ---------- INSERT SOURCES / METHODS ----------
        source_ids = []
        for name in PAYMENT_SOURCES:
            cursor.execute("INSERT INTO payment_sources (name) VALUES (%s)", (name,))
            source_ids.append(cursor.lastrowid)

        method_ids = []
        for name in PAYMENT_METHODS:
            cursor.execute("INSERT INTO payment_methods (name) VALUES (%s)", (name,))
            method_ids.append(cursor.lastrowid)

        # ---------- INSERT EXPENSES ----------
        cursor.executemany(
            """
            INSERT INTO expenses
                (amount, description, date, tag, is_repayed, is_removed, source_id, method_id)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
            """,
            build_expense_rows(fake, source_ids, method_ids, count),
        )
        conn.commit()
    finally:
        cursor.close()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the sample expenses database")
    parser.add_argument("--count", type=int, default=200, help="Number of expenses to insert")
    args = parser.parse_args()

    conn = get_connection()
    try:
        seed_database(conn, count=args.count)
    finally:
        conn.close()

    print("✅ Expenses database seeded successfully")
