from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import List, Optional


class Settings(BaseSettings):
    # URL completa tem prioridade sobre as partes abaixo
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_USER: str = "demo"
    DB_PASSWORD: str = "demo1234"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "extensions"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    CORS_ORIGINS: List[str] = ["*"]
    RATE_LIMIT: str = "200/minute"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> str:
        """URL de conexão usada pelo SQLAlchemy"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        url = URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)
