# SPDX-License-Identifier: Apache-2.0
"""Tests for DeletionSettings and the YAML settings loader."""

from __future__ import annotations

import pytest

from deletionguard.config import (
    ConfigVersionError,
    DeletionSettings,
    DuplicateListenerPolicy,
    load_settings,
    resolve_settings,
)


class TestDeletionSettings:
    @pytest.mark.fast
    @pytest.mark.config
    def test_defaults(self):
        settings = DeletionSettings()

        assert settings.config_version == "1"
        assert settings.duplicate_listeners is DuplicateListenerPolicy.REJECT
        assert settings.freeze_after_bootstrap is True
        assert settings.log_level == "INFO"
        assert settings.audit_log is False

    @pytest.mark.fast
    @pytest.mark.config
    def test_policy_and_log_level_normalized(self):
        settings = DeletionSettings(duplicate_listeners="IGNORE", log_level="debug")

        assert settings.duplicate_listeners is DuplicateListenerPolicy.IGNORE
        assert settings.log_level == "DEBUG"

    @pytest.mark.fast
    @pytest.mark.config
    def test_invalid_values_rejected(self):
        with pytest.raises(ValueError):
            DeletionSettings(duplicate_listeners="sometimes")
        with pytest.raises(ValueError):
            DeletionSettings(log_level="LOUD")
        with pytest.raises(ValueError):
            DeletionSettings(unknown_key=True)


class TestLoadSettings:
    @pytest.mark.config
    def test_load_kebab_case(self, config_file):
        path = config_file(
            'config-version: "1"\nduplicate-listeners: ignore\nfreeze-after-bootstrap: false\n'
            "audit-log: true\n"
        )

        settings = load_settings(path)

        assert settings.duplicate_listeners is DuplicateListenerPolicy.IGNORE
        assert settings.freeze_after_bootstrap is False
        assert settings.audit_log is True

    @pytest.mark.config
    def test_env_vars_expanded(self, config_file, monkeypatch):
        monkeypatch.setenv("DG_LOG_LEVEL", "WARNING")
        path = config_file('config_version: "1"\nlog_level: ${DG_LOG_LEVEL}\n')

        assert load_settings(path).log_level == "WARNING"

    @pytest.mark.config
    def test_missing_version(self, config_file):
        path = config_file("log_level: INFO\n")

        with pytest.raises(ConfigVersionError, match="config_version missing"):
            load_settings(path)

    @pytest.mark.config
    def test_too_old_version(self, config_file):
        path = config_file('config_version: "0"\n')

        with pytest.raises(ConfigVersionError, match="too old"):
            load_settings(path)

    @pytest.mark.config
    def test_newer_version_warns(self, config_file):
        path = config_file('config_version: "2"\n')

        with pytest.warns(UserWarning, match="best-effort"):
            settings = load_settings(path)

        assert settings.config_version == "2"

    @pytest.mark.config
    def test_versions_compare_numerically(self, config_file, monkeypatch):
        monkeypatch.setattr("deletionguard.config.loader.MIN_SUPPORTED_VERSION", "9")
        monkeypatch.setattr("deletionguard.config.loader.CURRENT_CONFIG_VERSION", "10")
        path = config_file('config_version: "10"\n')

        assert load_settings(path).config_version == "10"

    @pytest.mark.config
    def test_non_numeric_version(self, config_file):
        path = config_file('config_version: "one"\n')

        with pytest.raises(ConfigVersionError, match="must be an integer"):
            load_settings(path)

    @pytest.mark.config
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml")

    @pytest.mark.config
    def test_non_mapping_root(self, config_file):
        path = config_file("- just\n- a list\n")

        with pytest.raises(ValueError, match="dictionary at the root level"):
            load_settings(path)

    @pytest.mark.config
    def test_invalid_field(self, config_file):
        path = config_file('config_version: "1"\nduplicate_listeners: maybe\n')

        with pytest.raises(ValueError, match="Invalid settings"):
            load_settings(path)


class TestResolveSettings:
    @pytest.mark.config
    def test_defaults_without_path_or_env(self):
        assert resolve_settings() == DeletionSettings()

    @pytest.mark.config
    def test_env_var_path(self, config_file, monkeypatch):
        path = config_file('config_version: "1"\nlog_level: ERROR\n')
        monkeypatch.setenv("DELETIONGUARD_CONFIG", str(path))

        assert resolve_settings().log_level == "ERROR"
