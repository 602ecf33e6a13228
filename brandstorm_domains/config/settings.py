"""
Application settings using Pydantic for validation
"""
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

# Get the package directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings with environment variable validation"""

    # Application
    app_env: str = "development"
    app_name: str = "brandstorm-domains"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 3002
    reload: bool = False

    # Domain availability provider: namecheap | domainr
    domain_provider: str = "domainr"

    # Namecheap
    namecheap_api_user: Optional[str] = None
    namecheap_api_key: Optional[str] = None
    namecheap_client_ip: Optional[str] = None
    namecheap_sandbox: bool = False

    # Domainr (RapidAPI)
    domainr_rapidapi_key: Optional[str] = None
    domainr_rapidapi_host: str = "domainr.p.rapidapi.com"

    # Text Generation: openai | ollama
    llm_provider: str = "ollama"
    text_api_url: str = "https://api.openai.com/v1"
    text_api_key: Optional[str] = None
    text_model: Optional[str] = None
    ollama_api_url: str = "http://127.0.0.1:11434/api/generate"
    ollama_model: str = "llama3.2:latest"

    # TLD catalog
    tlds_file: Optional[str] = None

    # Rate limiting
    batch_delay_seconds: float = 1.0
    provider_timeout_seconds: float = 30.0

    @property
    def tlds_path(self) -> Path:
        if self.tlds_file:
            return Path(self.tlds_file)
        return BASE_DIR / "data" / "tlds.txt"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def is_development(self) -> bool:
        return self.app_env == "development"

    def is_production(self) -> bool:
        return self.app_env == "production"

    def get_domain_provider(self) -> str:
        """Normalized domain provider name (anything unknown maps to domainr)"""
        provider = (self.domain_provider or "").strip().lower()
        return "namecheap" if provider == "namecheap" else "domainr"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Create a global settings instance
settings = get_settings()
