from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="USERS_API_", env_file=".env")

    db_driver: str = "mysql+pymysql"
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_database: str = "users"
    # Takes precedence over the db_* fields when set
    database_url: str | None = None

    pool_size: int = 10
    pool_pre_ping: bool = True

    log_level: str = "INFO"
    log_format: str = "text"  # "text" | "json"

    host: str = "0.0.0.0"
    port: int = 3000

    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
