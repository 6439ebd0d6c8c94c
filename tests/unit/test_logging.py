"""
Unit Tests - Logging Configuration
"""
import logging

import structlog
from structlog.processors import JSONRenderer

from src.config import Settings
from src.config.logging import build_processors, build_renderer, configure_logging


class TestLoggingConfiguration:
    """Tests for the structlog setup"""

    def test_request_context_is_merged(self):
        """Test contextvars come first so request ids reach every line"""
        processors = build_processors(Settings(app_env="testing"))

        assert processors[0] is structlog.contextvars.merge_contextvars

    def test_service_fields_added(self):
        """Test each event is stamped with service and environment"""
        processors = build_processors(Settings(app_env="testing"))
        event = {"event": "hello"}

        for processor in processors[:4]:
            event = processor(logging.getLogger("catalog"), "info", event)

        assert event["service"] == "storefront-catalog"
        assert event["env"] == "testing"

    def test_renderer_choice(self):
        """Test json and text formats pick different renderers"""
        assert isinstance(build_renderer("json"), JSONRenderer)
        assert not isinstance(build_renderer("text"), JSONRenderer)

    def test_uvicorn_access_log_quieted(self):
        """Test the access log is raised above INFO"""
        configure_logging("INFO")

        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger().level == logging.INFO
