"""TOML config loading and profile overlay."""

import pytest

from betsettle.config import Settings, get_settings, load_config
from betsettle.errors import ValidationError


def test_missing_config_dir_gives_defaults(tmp_path):
    assert load_config(config_dir=tmp_path) == {}
    settings = get_settings(config_dir=tmp_path)
    assert settings.snapshot_path == "data/snapshot.json"
    assert settings.default_fee_bps is None
    assert settings.strict_two_sided is False
    assert settings.leaderboard_limit == 20
    assert settings.logging_level == "INFO"


def test_profile_overlay(tmp_path):
    (tmp_path / "default.toml").write_text(
        '[settlement]\ndefault_fee_bps = 150\n\n[logging]\nlevel = "info"\nformat = "json"\n'
    )
    (tmp_path / "dev.toml").write_text('[logging]\nlevel = "debug"\n')
    settings = get_settings(profile="dev", config_dir=tmp_path)
    assert settings.default_fee_bps == 150
    assert settings.logging_level == "DEBUG"
    assert settings.logging_format == "json"
    assert get_settings(profile="missing", config_dir=tmp_path).logging_level == "INFO"


def test_from_dict_ignores_unknown_sections():
    settings = Settings.from_dict({"leaderboard": {"limit": 5}, "other": {"x": 1}})
    assert settings.leaderboard_limit == 5


def test_default_fee_accepts_whole_numbers_only():
    assert Settings.from_dict({"settlement": {"default_fee_bps": 250.0}}).default_fee_bps == 250
    for raw in (2.5, "abc", "250", -1, 10_001, True):
        with pytest.raises(ValidationError):
            Settings.from_dict({"settlement": {"default_fee_bps": raw}}).default_fee_bps
