"""Unit tests for structlog configuration."""

import logging

import pytest
import structlog

from email_classifier.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging("INFO", "development")


def processor_types() -> list[type]:
    return [type(processor) for processor in structlog.get_config()["processors"]]


def test_development_pretty_prints_exceptions():
    configure_logging("DEBUG", "development")
    
    assert structlog.processors.ExceptionPrettyPrinter in processor_types()
    assert logging.getLogger().level == logging.DEBUG


def test_production_formats_exceptions_for_json():
    configure_logging("WARNING", "production")
    
    processors = structlog.get_config()["processors"]
    assert structlog.processors.format_exc_info in processors
    assert structlog.processors.ExceptionPrettyPrinter not in processor_types()
    assert logging.getLogger().level == logging.WARNING


def test_repeated_configuration_keeps_one_handler():
    configure_logging("INFO", "development")
    configure_logging("INFO", "development")
    
    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("httpx").level == logging.WARNING
