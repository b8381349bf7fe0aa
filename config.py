"""
Configuration — loads from .env, provides defaults.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
OWNER_CHAT_ID = int(os.getenv("OWNER_CHAT_ID", "0"))

# Web page
DASHBOARD_HOST = os.getenv("DASHBOARD_HOST", "127.0.0.1")
DASHBOARD_PORT = int(os.getenv("DASHBOARD_PORT", "8080"))
DASHBOARD_SECRET = os.getenv("DASHBOARD_SECRET", "change-me-in-production")

# Open-Meteo endpoints (free, no API key)
GEOCODING_URL = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
GEOCODING_LANGUAGE = os.getenv("GEOCODING_LANGUAGE", "en")
FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "7"))
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))  # seconds

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
