from typing import Optional

from psycopg import Connection, sql


class PostgresSlots:
    """
    Slot backend on a single key/value table. Call setup() once before use,
    the same way a checkpointer is set up.
    """

    def __init__(self, conn: Connection, table: str = "onboarding_slots"):
        self.conn = conn
        self.table = table

    def setup(self) -> None:
        with self.conn.cursor() as cur:
            cur.execute(
                sql.SQL(
                    """
                    CREATE TABLE IF NOT EXISTS {} (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
                    )
                    """
                ).format(sql.Identifier(self.table))
            )
        self.conn.commit()

    def get_item(self, key: str) -> Optional[str]:
        with self.conn.cursor() as cur:
            cur.execute(
                sql.SQL("SELECT value FROM {} WHERE key = %s").format(sql.Identifier(self.table)),
                (key,),
            )
            row = cur.fetchone()
        return row[0] if row is not None else None

    def set_item(self, key: str, value: str) -> None:
        with self.conn.cursor() as cur:
            cur.execute(
                sql.SQL(
                    """
                    INSERT INTO {} (key, value) VALUES (%s, %s)
                    ON CONFLICT (key) DO UPDATE
                    SET value = EXCLUDED.value, updated_at = now()
                    """
                ).format(sql.Identifier(self.table)),
                (key, value),
            )
        self.conn.commit()
