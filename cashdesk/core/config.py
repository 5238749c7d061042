from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cashdesk.models.user import SeedUser


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, DATA_DIR,
    DB_FILENAME, PASSWORD_HASH_ROUNDS). SEED_USERS is a JSON list of
    {"username", "password", "role"} objects.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Cash Desk"
    debug: bool = False
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "cashdesk.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided

    # Bootstrap users; empty means the seed run is a no-op
    seed_users: List[SeedUser] = Field(default_factory=list)
    password_hash_rounds: int = Field(10, ge=4, le=31)

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.data_dir.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
