"""Tests for RBACConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rbaccore import ConfigurationError, LogLevel, RBACConfig, load_config_from_env


class TestRBACConfig:
    """Tests for RBACConfig model."""

    def test_create_default_config(self) -> None:
        """Test creating an RBACConfig with defaults."""
        config = RBACConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.service_name is None
        assert config.strict_domains is True
        assert config.protect_builtin_roles is True

    def test_create_custom_config(self) -> None:
        config = RBACConfig(
            log_level=LogLevel.DEBUG,
            log_json=True,
            service_name="rbac-admin",
            strict_domains=False,
            protect_builtin_roles=False,
        )
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True
        assert config.service_name == "rbac-admin"
        assert config.strict_domains is False
        assert config.protect_builtin_roles is False

    def test_log_level_from_string(self) -> None:
        config = RBACConfig(log_level="debug")
        assert config.log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            RBACConfig(log_level="INVALID")

    def test_log_level_wrong_type(self) -> None:
        with pytest.raises(ValueError, match="Log level must be string"):
            RBACConfig(log_level=10)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValueError):
            RBACConfig(unknown_field="value")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Config is built once and not changed afterwards."""
        config = RBACConfig()
        with pytest.raises(ValueError):
            config.strict_domains = False  # type: ignore[misc]


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_load_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_config_from_env()
            assert config.log_level == LogLevel.INFO
            assert config.log_json is False
            assert config.service_name is None
            assert config.strict_domains is True
            assert config.protect_builtin_roles is True

    def test_load_from_env(self) -> None:
        env_vars = {
            "LOG_LEVEL": "WARNING",
            "LOG_JSON": "yes",
            "SERVICE_NAME": "rbac-admin",
            "RBAC_STRICT_DOMAINS": "false",
            "RBAC_PROTECT_BUILTIN_ROLES": "0",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            config = load_config_from_env()
            assert config.log_level == LogLevel.WARNING
            assert config.log_json is True
            assert config.service_name == "rbac-admin"
            assert config.strict_domains is False
            assert config.protect_builtin_roles is False

    def test_strict_domains_truthy_values(self) -> None:
        for value in ("true", "1", "yes", "on", "TRUE"):
            with patch.dict(os.environ, {"RBAC_STRICT_DOMAINS": value}, clear=True):
                assert load_config_from_env().strict_domains is True

    def test_invalid_log_level_from_env(self) -> None:
        """Bad environment values surface as ConfigurationError, not a pydantic error."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ConfigurationError, match="Invalid log level") as exc_info:
                load_config_from_env()
        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert exc_info.value.details == {"fields": ["log_level"]}
        assert isinstance(exc_info.value.__cause__, ValidationError)
