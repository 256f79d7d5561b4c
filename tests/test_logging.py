"""Tests for rbaccore.logging module."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from rbaccore import (
    LogLevel,
    RBACConfig,
    RBACFormatter,
    RBACLoggerAdapter,
    get_rbac_logger,
    setup_logging,
)


def _record(msg: str = "Added 2 policies", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="rbaccore.manager",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRBACFormatter:
    """Tests for RBACFormatter."""

    def test_json_format(self) -> None:
        output = RBACFormatter(json_format=True).format(_record(role="editor", domain="collections"))
        data = json.loads(output)
        assert data["level"] == "INFO"
        assert data["logger"] == "rbaccore.manager"
        assert data["message"] == "Added 2 policies"
        assert data["role"] == "editor"
        assert data["domain"] == "collections"

    def test_json_without_context(self) -> None:
        data = json.loads(RBACFormatter(json_format=True).format(_record()))
        assert "role" not in data
        assert "domain" not in data

    def test_json_includes_extras(self) -> None:
        data = json.loads(RBACFormatter().format(_record(error_code="UNKNOWN_VERB")))
        assert data["error_code"] == "UNKNOWN_VERB"

    def test_plain_format(self) -> None:
        output = RBACFormatter(json_format=False).format(_record(role="editor", domain="tenants"))
        assert "INFO" in output
        assert "role=editor" in output
        assert "domain=tenants" in output
        assert output.endswith(": Added 2 policies")

    def test_exception_included(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        data = json.loads(RBACFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestLoggerAdapter:
    """Tests for RBACLoggerAdapter."""

    def test_get_rbac_logger(self) -> None:
        logger = get_rbac_logger("rbaccore.test", role="viewer")
        assert isinstance(logger, RBACLoggerAdapter)
        assert logger.role == "viewer"

    def test_bound_role_added(self) -> None:
        logger = get_rbac_logger("rbaccore.test", role="viewer")
        _, kwargs = logger.process("msg", {})
        assert kwargs["extra"] == {"role": "viewer"}

    def test_call_overrides_role(self) -> None:
        logger = get_rbac_logger("rbaccore.test", role="viewer")
        _, kwargs = logger.process("msg", {"role": "editor", "domain": "roles"})
        assert kwargs["extra"] == {"role": "editor", "domain": "roles"}

    def test_caller_extra_not_mutated(self) -> None:
        logger = get_rbac_logger("rbaccore.test", role="viewer")
        caller_extra = {"error_code": "UNKNOWN_VERB"}
        _, kwargs = logger.process("msg", {"extra": caller_extra, "domain": "roles"})
        assert kwargs["extra"] == {"error_code": "UNKNOWN_VERB", "role": "viewer", "domain": "roles"}
        assert caller_extra == {"error_code": "UNKNOWN_VERB"}

    def test_records_carry_context(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_rbac_logger("rbaccore.test")
        with caplog.at_level(logging.INFO, logger="rbaccore.test"):
            logger.info("Removed %d policies", 3, role="custom", domain="cluster")
        record = caplog.records[-1]
        assert record.getMessage() == "Removed 3 policies"
        assert record.role == "custom"
        assert record.domain == "cluster"


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_from_config(self) -> None:
        setup_logging(RBACConfig(log_level=LogLevel.DEBUG))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, RBACFormatter)

    def test_json_from_config(self) -> None:
        setup_logging(RBACConfig(log_json=True))
        assert logging.getLogger().handlers[0].formatter.json_format is True

    def test_json_override(self) -> None:
        setup_logging(RBACConfig(log_json=True), json_format=False)
        assert logging.getLogger().handlers[0].formatter.json_format is False

    def test_no_duplicate_handlers(self) -> None:
        setup_logging(RBACConfig())
        setup_logging(RBACConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_service_logger_level(self) -> None:
        setup_logging(RBACConfig(log_level="WARNING", service_name="rbac-admin"))
        assert logging.getLogger("rbac-admin").level == logging.WARNING
