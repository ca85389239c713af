"""
Configuration management for the movie catalog.

Loads configuration from environment variables and provides
a centralized Config dataclass for all settings.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL


@dataclass
class Config:
    """Centralized configuration from environment variables."""

    # Database
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = ""
    db_password: str = ""
    db_name: str = ""
    sqlite_path: str = "movie_catalog.db"
    db_echo: bool = False

    # Paths
    log_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")
    log_level: int = logging.INFO

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    seed_on_startup: bool = False

    # CORS settings
    allowed_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided,
                     looks for .env in the current directory.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If the MySQL settings are only partially given.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        # Database config
        database_url = os.getenv("DATABASE_URL") or None
        db_host = os.getenv("SQL_HOST", "localhost")
        db_port = int(os.getenv("SQL_PORT", "3306"))
        db_user = os.getenv("SQL_USER", "")
        db_password = os.getenv("SQL_PASS", "")
        db_name = os.getenv("SQL_DB", "")

        if bool(db_user) != bool(db_name):
            raise ValueError("SQL_USER and SQL_DB environment variables must be set together")

        sqlite_path = os.getenv("SQLITE_PATH", "movie_catalog.db")
        db_echo = os.getenv("DB_ECHO", "false").lower() == "true"

        # Logging
        log_dir = Path(os.getenv("LOG_DIR", Path.cwd() / "logs"))
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown LOG_LEVEL: {level_name}")

        # API settings
        api_host = os.getenv("API_HOST", "0.0.0.0")
        api_port = int(os.getenv("API_PORT", "8000"))
        api_debug = os.getenv("API_DEBUG", "false").lower() == "true"
        seed_on_startup = os.getenv("SEED_ON_STARTUP", "false").lower() == "true"

        # CORS settings
        origins_str = os.getenv("ALLOWED_ORIGINS", "")
        allowed_origins = [o.strip() for o in origins_str.split(",") if o.strip()]

        return cls(
            database_url=database_url,
            db_host=db_host,
            db_port=db_port,
            db_user=db_user,
            db_password=db_password,
            db_name=db_name,
            sqlite_path=sqlite_path,
            db_echo=db_echo,
            log_dir=log_dir,
            log_level=log_level,
            api_host=api_host,
            api_port=api_port,
            api_debug=api_debug,
            seed_on_startup=seed_on_startup,
            allowed_origins=allowed_origins,
        )

    def get_db_url(self) -> str:
        """Get SQLAlchemy database URL."""
        if self.database_url:
            return self.database_url
        if self.db_user and self.db_name:
            url = URL.create(
                "mysql+pymysql",
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            )
            return url.render_as_string(hide_password=False)
        return f"sqlite:///{self.sqlite_path}"

    def get_cors_origins(self) -> List[str]:
        """Get allowed CORS origins, defaulting to any origin."""
        return self.allowed_origins or ["*"]
