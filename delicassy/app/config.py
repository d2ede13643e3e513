import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _optional_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # Backend REST API (all business logic lives there)
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
    # Seconds; unset means requests waits indefinitely
    API_TIMEOUT = _optional_float(os.getenv("API_TIMEOUT"))

    # Cart id and theme flag live in the session cookie, so keep it around
    PERMANENT_SESSION_LIFETIME = timedelta(days=int(os.getenv("SESSION_DAYS", "365")))

    CHECKOUT_SHIPPING_ADDRESS = {
        "full_name": os.getenv("CHECKOUT_FULL_NAME", "Delicassy Guest"),
        "line1": os.getenv("CHECKOUT_LINE1", "123 Craft Ln"),
        "city": os.getenv("CHECKOUT_CITY", "Artisan"),
        "postal_code": os.getenv("CHECKOUT_POSTAL_CODE", "00000"),
        "country": os.getenv("CHECKOUT_COUNTRY", "US"),
    }
    CHECKOUT_PAYMENT = {"method": "card", "token": os.getenv("CHECKOUT_PAYMENT_TOKEN", "test")}

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
