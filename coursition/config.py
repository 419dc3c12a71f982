"""Application configuration via environment variables."""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # HTTP server
    port: int = 3001
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Logging
    log_level: str = "info"

    # Jobs backend
    jobs_backend: str = "memory"  # "memory" or "supabase"
    jobs_table: str = "jobs-table"

    # Supabase (only when jobs_backend=supabase)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Parsing engine
    media_backend: str = "mock"  # "mock" or "http"
    parsing_engine_url: str = "http://localhost:8080"
    parsing_engine_timeout: float = 30.0
    parse_delay_seconds: Optional[float] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
