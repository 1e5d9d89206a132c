from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Every variable is prefixed with SHORTY_ (e.g. SHORTY_SALT).
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    
    Codec values (alphabet, salt, padding) are validated when the
    short code strategy is built, not here.
    """
    
    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    
    # Application
    app_name: str = "Shorty"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Database
    database_url: str = "sqlite:///./shorty.db"
    store_backend: str = "sqlalchemy"  # Options: "sqlalchemy", "memory"
    
    # Public hostname used to render short links; empty means "use the request's base URL"
    hostname: str = ""
    
    # Codec
    alphabet: str = DEFAULT_ALPHABET
    salt: str = ""  # Empty disables salting
    padding: int = 3  # Seed digits prepended when salting is on
    
    # Access control for registering URLs
    password: str = ""
    whitelist: List[str] = []
    
    # Hit tracking
    track: bool = True
    
    # Cache settings
    cache_backend: str = "memory"  # Options: "redis", "memory", "null"
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl: int = 3600  # Cache TTL in seconds (1 hour)
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_prefix="SHORTY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
