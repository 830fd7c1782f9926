import os

from dotenv import load_dotenv

load_dotenv()


def _split_list(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # Storefront GraphQL API
    BIGCOMMERCE_STORE_HASH = os.getenv("BIGCOMMERCE_STORE_HASH", "")
    BIGCOMMERCE_CHANNEL_ID = os.getenv("BIGCOMMERCE_CHANNEL_ID", "1")
    BIGCOMMERCE_CUSTOMER_IMPERSONATION_TOKEN = os.getenv("BIGCOMMERCE_CUSTOMER_IMPERSONATION_TOKEN", "")
    # Full endpoint override (proxies, local mocks); derived from the store hash when unset
    BIGCOMMERCE_GRAPHQL_URL = os.getenv("BIGCOMMERCE_GRAPHQL_URL") or None
    BIGCOMMERCE_API_TIMEOUT = float(os.getenv("BIGCOMMERCE_API_TIMEOUT", "10"))

    # Comma-separated list; the first entry is not implicitly the default
    LOCALES = _split_list(os.getenv("LOCALES", "en,fr"))
    DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")

    # Comma-separated list
    CORS_ORIGINS = _split_list(os.getenv("CORS_ORIGINS", ""))

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    BIGCOMMERCE_STORE_HASH = "abc123"
    BIGCOMMERCE_CHANNEL_ID = "1"
    BIGCOMMERCE_CUSTOMER_IMPERSONATION_TOKEN = "test-token"
    BIGCOMMERCE_GRAPHQL_URL = None
    LOCALES = ["en", "fr"]
    DEFAULT_LOCALE = "en"
