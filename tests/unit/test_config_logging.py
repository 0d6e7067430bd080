# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the config_logging.py module."""

import logging
from typing import Any

import pytest

from iconfetcher.config import settings
from iconfetcher.config_logging import GCPCompatibleJSONFormatter, configure_logging


def test_configure_logging_invalid_format() -> None:
    """Test that configure_logging will raise a ValueError when encountering unknown log
    formats.
    """
    old_format = settings.logging.format
    settings.logging.format = "invalid"

    with pytest.raises(ValueError) as excinfo:
        configure_logging()

    assert "Invalid log format:" in str(excinfo)

    settings.logging.format = old_format


def test_configure_logging_mozlog_production() -> None:
    """Test that configure_logging will raise a ValueError when using a format other
    than 'mozlog' in production.
    """
    with settings.using_env("production"):
        old_format = settings.logging.format
        settings.logging.format = "pretty"

        with pytest.raises(ValueError) as excinfo:
            configure_logging()

        assert "Log format must be 'mozlog' in production" in str(excinfo)

        settings.logging.format = old_format


def test_configure_log_handler_assigned_mozlog() -> None:
    """Test that the log handler is assigned as expected when the configured format is 'mozlog'"""
    old_format = settings.logging.format
    settings.logging.format = "mozlog"
    configure_logging()

    log_manager: Any = logging.root.manager
    handler_name: Any = log_manager.loggerDict["iconfetcher"].handlers[0].name
    assert handler_name == "console-mozlog"

    settings.logging.format = old_format


def test_configure_log_handler_assigned_pretty() -> None:
    """Test that the log handler is assigned as expected when the configured format is 'pretty'"""
    old_format = settings.logging.format
    settings.logging.format = "pretty"
    configure_logging()

    log_manager: Any = logging.root.manager
    handler_name: Any = log_manager.loggerDict["iconfetcher"].handlers[0].name
    assert handler_name == "console-pretty"

    settings.logging.format = old_format


def test_gcp_formatter_adds_severity() -> None:
    """Test that the JSON formatter reports a GCP compatible severity."""
    formatter = GCPCompatibleJSONFormatter(logger_name="iconfetcher")
    record = logging.LogRecord("iconfetcher.test", logging.WARNING, __file__, 1, "hi", None, None)

    assert formatter.convert_record(record)["severity"] == 400


def test_configure_logging_exported_from_package() -> None:
    """Test that applications can configure logging from the package root."""
    import iconfetcher

    assert iconfetcher.configure_logging is configure_logging
    assert "configure_logging" in iconfetcher.__all__
