"""Test environment: must be applied before aione.core.config is imported."""

import os

os.environ["JWT_SECRET"] = "test-secret-not-for-production-use-only"
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ["API_PREFIX"] = "/api"
