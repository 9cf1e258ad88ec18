import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5000",
    "http://127.0.0.1:5000",
    "http://localhost:3000",
    "http://localhost:5173",
]


class Settings:
    def __init__(self):
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./tournament.db")
        self.db_sslmode: str = os.getenv("DB_SSLMODE", "")
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.environment: str = os.getenv("ENVIRONMENT", "production")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", 5000))

        origins = os.getenv("CORS_ORIGINS", "")
        self.cors_origins: List[str] = (
            [o.strip() for o in origins.split(",") if o.strip()] if origins else list(DEFAULT_CORS_ORIGINS)
        )
        frontend_url = os.getenv("FRONTEND_URL")
        if frontend_url and frontend_url not in self.cors_origins:
            self.cors_origins.append(frontend_url)

        # JWT
        # JWT_SECRET_KEY must be set in production; the fallback is for local development only.
        self.jwt_secret_key: str = os.getenv("JWT_SECRET_KEY", "tournament-jwt-secret-change-in-production")
        self.jwt_algorithm: str = "HS256"
        self.jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", 60 * 24))

        # Seeded admin account
        self.admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
        self.admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

        self.default_qr_code_url: str = os.getenv("DEFAULT_QR_CODE_URL", "/attached_assets/payment-qr-new.jpg")

        # Rate limiting
        self.rate_limit_enabled: bool = os.getenv("RATE_LIMIT_ENABLED", "True").lower() == "true"
        self.rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", 150))
        self.rate_limit_per_hour: int = int(os.getenv("RATE_LIMIT_PER_HOUR", 2100))

    @property
    def is_development(self) -> bool:
        return self.debug or self.environment == "development"


settings = Settings()
