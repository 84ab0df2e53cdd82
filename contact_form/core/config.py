import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings read from environment variables.

    A `.env` file in the working directory is loaded first, when present.
    """

    database_url: str = "sqlite:///./contatos.db"
    access_log_path: str = "access.log"
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            access_log_path=os.getenv("ACCESS_LOG_PATH", cls.access_log_path),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
