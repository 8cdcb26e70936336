import json
import logging

import pytest
from pydantic import ValidationError as SchemaValidationError

from ecostay.config.logging import CustomJsonFormatter, build_logging_config
from ecostay.config.settings import Settings
from ecostay.core.logging import get_logger, sanitize_context


def test_vite_variable_names_are_accepted():
    config = Settings(_env_file=None, VITE_SUPABASE_URL="https://x.supabase.co", VITE_SUPABASE_ANON_KEY="anon")

    assert config.SUPABASE_URL == "https://x.supabase.co"
    assert config.SUPABASE_ANON_KEY == "anon"
    config.require_store_config()


def test_defaults():
    config = Settings(_env_file=None)

    assert config.PORT == 5174
    assert config.GEMINI_MODEL == "gemini-2.5-flash"
    assert (config.PHOTO_BUCKET, config.VIDEO_BUCKET) == ("event-photos", "event-videos")


def test_cors_origins_from_comma_separated_string():
    config = Settings(_env_file=None, CORS_ORIGINS="http://localhost:5173, https://ecostay.example")

    assert config.CORS_ORIGINS == ["http://localhost:5173", "https://ecostay.example"]


def test_log_level_is_validated():
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
    with pytest.raises(SchemaValidationError):
        Settings(_env_file=None, LOG_LEVEL="chatty")


def test_logging_config_adds_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "ecostay.log"
    config = Settings(_env_file=None, LOG_FILE=str(log_file), LOG_FORMAT="json")

    logging_config = build_logging_config(config)

    assert logging_config["handlers"]["console"]["formatter"] == "json"
    assert logging_config["handlers"]["file"]["filename"] == str(log_file)
    assert logging_config["loggers"]["ecostay"]["handlers"] == ["console", "file"]
    assert log_file.parent.is_dir()


def test_json_formatter_adds_view_and_user():
    record = logging.LogRecord("ecostay.views", logging.INFO, __file__, 1, "loaded", None, None)
    record.view = "dashboard"
    record.user_id = "u1"

    payload = json.loads(CustomJsonFormatter("%(message)s").format(record))

    assert payload["message"] == "loaded"
    assert payload["level"] == "INFO"
    assert payload["view"] == "dashboard"
    assert payload["user_id"] == "u1"


def test_sensitive_context_is_redacted():
    clean = sanitize_context({"password": "pw", "nested": {"access_token": "t"}, "hostel_id": "h1"})

    assert clean == {"password": "[REDACTED]", "nested": {"access_token": "[REDACTED]"}, "hostel_id": "h1"}


def test_logger_adapter_context():
    logger = get_logger("ecostay.test")

    logger.add_context(view="forum", user_id="u1")
    assert logger._context == {"view": "forum", "user_id": "u1"}
    logger.remove_context("view")
    assert logger._context == {"user_id": "u1"}
    logger.clear_context()
    assert logger._context == {}
