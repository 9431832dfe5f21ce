from pydantic_settings import BaseSettings

from clockedin.core.env import load_env

load_env()


class Settings(BaseSettings):
    ENV: str = "development"
    PORT: int = 3001
    FRONTEND_URL: str = "http://localhost:5173"
    CORS_ORIGINS: list[str] = ["https://clocked-in.vercel.app", "http://localhost:5173"]
    JWT_SECRET: str = "your-secret-key-change-in-production"
    JWT_EXPIRE_HOURS: int = 24
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_REDIRECT_URI: str = "http://localhost:3001/auth/google/callback"
    GOOGLE_CALENDAR_ID: str = "primary"
    STATS_YEAR: int = 2025
    STATS_CACHE_TTL_SECONDS: float = 300.0
    TOKEN_SWEEP_INTERVAL_SECONDS: float = 3600.0


settings = Settings()
