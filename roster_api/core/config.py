# roster_api/core/config.py
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Student Record Database API"
    VERSION: str = "1.0.0"

    # "production" turns on secure cookies and hides the default credentials
    ENVIRONMENT: str = "development"

    HOST: str = "0.0.0.0"
    PORT: int = 8090

    # Database
    # Process-lifetime in-memory SQLite
    DATABASE_URL: str = "sqlite://"

    # Session cookie
    SESSION_SECRET: str = "student-record-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "student_record_sid"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60  # 24 hours

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # Seeded admin account
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
