from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    # Store
    store_backend: str = "memory"  # memory | supabase
    store_table: str = "kv_store"

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Bypasses RLS; preferred for seeding

    # Password policy
    default_password_length: int = 12

    # App
    app_name: str = "procurex-auth"
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def uses_supabase(self) -> bool:
        return self.store_backend.strip().lower() == "supabase"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
