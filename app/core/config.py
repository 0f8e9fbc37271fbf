"""
Configuration settings for the API.
Loads environment variables and provides application settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    
    # Database
    DATABASE_URL: str = "sqlite:///./accounts.db"
    DATABASE_ECHO: bool = False
    
    # User service (owner lookups)
    USER_SERVICE_URL: str = "http://localhost:8081/users"
    USER_SERVICE_TIMEOUT: float = 5.0
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Account Bank Service"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "REST API for bank account records owned by users of the user service"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
