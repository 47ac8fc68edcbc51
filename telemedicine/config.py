from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "TeleMedicine"
    app_version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://telemedicine:telemedicine@db:5432/telemedicine"

    # Paging
    default_page_limit: int = 20

    # CORS
    backend_cors_origins: list[str] = ["http://localhost", "http://localhost:3000"]

    model_config = {"env_file": ".env", "case_sensitive": False}


settings = Settings()
