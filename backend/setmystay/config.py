from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "SetMyStay"
    debug: bool = False
    api_prefix: str = "/api/v1"

    database_url: str = "sqlite:///./setmystay.db"
    seed_catalog: bool = True

    llm_provider: Literal["claude", "openai"] = "claude"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    llm_temperature: float = 0.1

    cors_origins: str = "http://localhost:3000"

    # Browsing defaults applied whenever a category is opened without filters
    default_budget: int = 50000
    default_city: str = "Navi Mumbai"

    # Mock admin gate. Override these in .env; they are not hashed.
    admin_password: str = "change-me"
    admin_pin: str = "00000000"
    admin_answer: str = "change me"

    model_config = {"env_file": ".env"}


settings = Settings()
