"""
Configuration management using environment variables with fallback to defaults.
"""
import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "development")

# Database Configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storyquest.db")

# JWT Configuration
SECRET_KEY = os.getenv("SECRET_KEY", os.getenv("JWT_SECRET", "fallback_secret_key_for_development"))
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080"))  # 7 days default

# CORS Origins - comma separated, "*" allows all
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# LLM provider ("openai" for any chat-completions compatible API, "mock" for offline use)
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()
LLM_API_KEY = os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", ""))
LLM_API_URL = os.getenv("LLM_API_URL", "https://api.openai.com/v1/chat/completions")
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4o")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.8"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "500"))
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

# Dungeon Master tuning
DM_TEMPERATURE = float(os.getenv("DM_TEMPERATURE", "0.8"))
DM_MAX_TOKENS = int(os.getenv("DM_MAX_TOKENS", "1500"))
DM_INTRO_MAX_TOKENS = int(os.getenv("DM_INTRO_MAX_TOKENS", "1000"))
DM_ITEM_MAX_TOKENS = int(os.getenv("DM_ITEM_MAX_TOKENS", "500"))
DM_CONTEXT_POST_LIMIT = int(os.getenv("DM_CONTEXT_POST_LIMIT", "10"))
DM_RECENT_POST_LIMIT = int(os.getenv("DM_RECENT_POST_LIMIT", "5"))
DM_STORY_TOKEN_BUDGET = int(os.getenv("DM_STORY_TOKEN_BUDGET", "1000"))
