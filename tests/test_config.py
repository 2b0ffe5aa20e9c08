"""Unit tests for aione.core.config.Settings validation."""

import os
import unittest
from unittest.mock import MagicMock, patch

from pydantic import ValidationError

from aione.core.config import Settings
from aione.core.database import check_db_connected


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"JWT_SECRET": "s3cret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestJwtSecret(unittest.TestCase):
    """JWT_SECRET has no default and must be non-empty."""

    def test_missing_secret_fails(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_secret_fails(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_secret_from_environment(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": "from-env"}, clear=True):
            s = Settings(_env_file=None)
        self.assertEqual(s.JWT_SECRET.get_secret_value(), "from-env")
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 1440)


class TestDatabaseUrl(unittest.TestCase):
    def test_postgres_accepted(self) -> None:
        s = _settings(DATABASE_URL=" postgresql://u:p@db:5432/aione ")
        self.assertEqual(s.DATABASE_URL, "postgresql://u:p@db:5432/aione")
        self.assertFalse(s.is_sqlite)

    def test_sqlite_accepted(self) -> None:
        self.assertTrue(_settings(DATABASE_URL="sqlite:///./dev.db").is_sqlite)

    def test_other_scheme_rejected(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            _settings(DATABASE_URL="mysql://u:p@db/aione")
        self.assertIn("sqlite://", str(ctx.exception))
        self.assertNotIn("PostgreSQL URL", str(ctx.exception))


class TestOtherFields(unittest.TestCase):
    def test_unsupported_algorithm_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="none")

    def test_expire_minutes_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")

    def test_cors_origins(self) -> None:
        self.assertEqual(_settings(APP_ENV="dev").cors_origins, ["*"])
        self.assertEqual(_settings(APP_ENV="prod").cors_origins, [])
        self.assertEqual(
            _settings(APP_ENV="prod", CORS_ORIGINS="https://a.example, https://b.example").cors_origins,
            ["https://a.example", "https://b.example"],
        )


class TestCheckDbConnected(unittest.TestCase):
    """check_db_connected reports failures instead of raising."""

    def test_connected(self) -> None:
        db = MagicMock()
        self.assertTrue(check_db_connected(db))
        db.execute.assert_called_once()

    def test_disconnected(self) -> None:
        from sqlalchemy.exc import OperationalError

        db = MagicMock()
        db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        self.assertFalse(check_db_connected(db))


if __name__ == "__main__":
    unittest.main()
