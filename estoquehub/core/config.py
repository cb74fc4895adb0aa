# Standard library imports
import os
from typing import Final, List, Optional

# External package imports
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    Values are read once at construction; the instance is then passed to
    whatever needs it (container, use cases, security helpers).
    """
    
    def __init__(self) -> None:
        # Database Configuration
        database_url = os.getenv("DATABASE_URL", "").strip() or "sqlite:///./estoquehub.db"
        # Render/Heroku style URLs use the deprecated postgres:// scheme
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)
        self.database_url: Final[str] = database_url
        
        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "480")
        )
        
        # HTTP Server Configuration
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGIN", "*").split(",")
            if origin.strip()
        ]
        
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get default application settings (singleton pattern)
    
    Loads the .env file on first use.
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings
