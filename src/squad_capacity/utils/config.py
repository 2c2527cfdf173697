# src/squad_capacity/utils/config.py
"""
Environment-driven configuration.

Reads .env from the project root once at import; every value has a default
so the package imports cleanly without a .env present.
"""

import os
from pathlib import Path
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load .env from project root
BASE_DIR = Path(__file__).resolve().parents[3]
load_dotenv(BASE_DIR / ".env")


class Config:
    DB_DRIVER = os.getenv("DB_DRIVER", "ODBC Driver 17 for SQL Server")
    DB_SERVER = os.getenv("DB_SERVER", "localhost").strip()
    DB_DATABASE = os.getenv("DB_DATABASE", "squad_planning")
    DB_TRUSTED_CONNECTION = os.getenv("DB_TRUSTED_CONNECTION", "yes")

    # Full SQLAlchemy URL; wins over the DB_* parts when set
    DATABASE_URL = os.getenv("DATABASE_URL", "").strip()

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mssql+pyodbc://@{self.DB_SERVER}/{self.DB_DATABASE}"
            f"?driver={quote_plus(self.DB_DRIVER)}"
            f"&trusted_connection={self.DB_TRUSTED_CONNECTION}"
        )

    def __repr__(self):
        return f"<Config server={self.DB_SERVER} db={self.DB_DATABASE}>"


# Singleton
config = Config()
