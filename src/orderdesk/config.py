import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Repo root when installed in editable mode.
_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings:
    # Storage
    DATA_DIR: str = os.getenv("ORDERDESK_DATA_DIR", str(_PROJECT_ROOT / "data"))

    # Identity
    CLIENT_ID: str = os.getenv("ORDERDESK_CLIENT_ID", "ecommerce-backend")
    CLAIMS_FILE: str = os.getenv("ORDERDESK_CLAIMS_FILE", "")

    # Logging
    LOG_LEVEL: str = os.getenv("ORDERDESK_LOG_LEVEL", "WARNING")

    @property
    def data_path(self) -> Path:
        return Path(self.DATA_DIR)


settings = Settings()
