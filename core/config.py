from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Linea API"
    ENV: str = "development"

    # -------------------------------------------------
    # Frontend Domains
    # -------------------------------------------------
    APP_DOMAIN: Optional[str] = None

    FRONTEND_DOMAINS: List[str] = [
        "https://app.linea.studio",
        "https://linea.studio",
    ]

    # -------------------------------------------------
    # CORS (auto-built below)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (Primary DB & Auth)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    SUPABASE_JWT_SECRET: Optional[str] = None

    # When the JWT secret is set, tokens are verified locally instead of via GoTrue
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = "authenticated"

    # -------------------------------------------------
    # View configuration
    # -------------------------------------------------
    # Used when a workspace has no discipline or an unknown one
    DEFAULT_DISCIPLINE: str = "architecture"

    # Module catalog is global and rarely changes
    MODULE_CATALOG_CACHE_TTL: int = 300

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

# 1) add the configured app domain
if settings.APP_DOMAIN:
    domain = settings.APP_DOMAIN
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

# 2) add the public front-end domains
cors_origins.extend([d.rstrip("/") for d in settings.FRONTEND_DOMAINS])

# 3) remove duplicates
settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
