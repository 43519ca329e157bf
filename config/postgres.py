import os
from typing import Optional

import psycopg
from dotenv import load_dotenv
from psycopg.conninfo import make_conninfo
from pydantic import BaseModel, ConfigDict, Field, SecretStr

load_dotenv()


class PostgresConfig(BaseModel):
    """Connection settings for the optional Postgres slot backend."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int = Field(default=5432, gt=0, lt=65536)
    dbname: str
    user: str
    password: SecretStr
    sslmode: Optional[str] = Field(default=None, description="e.g. require, verify-full")
    table: str = Field(default="onboarding_slots", description="Key/value table holding the slots")

    @classmethod
    def from_env(cls) -> "PostgresConfig":
        env = {
            "port": os.getenv("PG_PORT"),
            "sslmode": os.getenv("PG_SSLMODE"),
            "table": os.getenv("PG_TABLE"),
        }
        return cls(
            host=os.environ["PG_HOST"],
            dbname=os.environ["PG_DB"],
            user=os.environ["PG_USER"],
            password=os.environ["PG_PASSWORD"],
            **{k: v for k, v in env.items() if v is not None},
        )

    def conninfo(self) -> str:
        params = {
            "host": self.host,
            "port": self.port,
            "dbname": self.dbname,
            "user": self.user,
            "password": self.password.get_secret_value(),
        }
        if self.sslmode:
            params["sslmode"] = self.sslmode
        return make_conninfo(**params)

    def connect(self) -> psycopg.Connection:
        return psycopg.connect(self.conninfo(), autocommit=True)
