"""
Storefront Settings

All settings come from environment variables and are read once at import.
"""

import os

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Production deployments get the compact log format
ENVIRONMENT = os.environ.get("STOREFRONT_ENV", "development")

# Cart persistence: memory | file | redis
CART_STORAGE = os.environ.get("CART_STORAGE", "memory").lower()
CART_STORAGE_PATH = os.environ.get("CART_STORAGE_PATH", ".carts")
CART_COOKIE_NAME = os.environ.get("CART_COOKIE_NAME", "cart_session")

# Upstash Redis (only needed when CART_STORAGE=redis)
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# Simulated catalog fetch latency, in milliseconds
CATALOG_DELAY_MS = int(os.environ.get("CATALOG_DELAY_MS", "500"))
