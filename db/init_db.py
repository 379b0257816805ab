"""
db/init_db.py
-------------
Creates the catalog tables if they do not already exist and seeds the demo
rows the exercise scenarios rely on.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from config import DB_CONFIG, DbConfig
from db.connection import connect
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Categories: one row per product family
CREATE TABLE IF NOT EXISTS pm_category (
    categoryId      SERIAL PRIMARY KEY,
    category        VARCHAR(50) UNIQUE NOT NULL
);

-- Products: each product belongs to at most one category
CREATE TABLE IF NOT EXISTS pm_product (
    productId       SERIAL PRIMARY KEY,
    label           VARCHAR(100) NOT NULL,
    categoryId      INT REFERENCES pm_category(categoryId) ON DELETE SET NULL,
    price           NUMERIC(10,2) NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_product_category ON pm_product(categoryId);
"""

SEED_SQL = """
INSERT INTO pm_category (categoryId, category) VALUES
    (1, 'fruit'),
    (2, 'vegetable')
ON CONFLICT DO NOTHING;

INSERT INTO pm_product (label, categoryId, price)
SELECT v.label, v.categoryId, v.price
FROM (VALUES
    ('apple', 1, 0.15),
    ('pineapple', 1, 0.95),
    ('banana', 1, 0.25),
    ('carrot', 2, 0.10),
    ('potato', 2, 0.08)
) AS v(label, categoryId, price)
WHERE NOT EXISTS (SELECT 1 FROM pm_product);

SELECT setval(pg_get_serial_sequence('pm_category', 'categoryid'),
              (SELECT MAX(categoryId) FROM pm_category));
"""


def create_tables(config: DbConfig, seed: bool = True) -> None:
    """
    Execute the schema SQL, and optionally the seed rows.
    Safe to call multiple times (uses IF NOT EXISTS / ON CONFLICT).

    Args:
        config: Validated connection settings.
        seed: Insert the demo categories and products when the tables are empty.
    """
    conn = connect(config)
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
            if seed:
                cur.execute(SEED_SQL)
        conn.commit()
        logger.info("Catalog schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    create_tables(DbConfig.from_mapping(DB_CONFIG))
    print("✅ Catalog schema created successfully.")
