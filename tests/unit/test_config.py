"""Unit tests for config.py"""

import pytest

from mdsite.config import load_config


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run each test in an empty directory with no MDSITE_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("CONTENT_DIR", "OUTPUT_DIR", "WORDS_PER_MINUTE", "WORKERS", "LOG_LEVEL", "PARSER_CONFIG"):
        monkeypatch.delenv(f"MDSITE_{name}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no mdsite.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.content_dir == "content"
    assert settings.output_dir == "dist"
    assert settings.words_per_minute == 200
    assert settings.workers == 1
    assert settings.log_level == "WARNING"


def test_load_config_reads_yaml(tmp_path):
    (tmp_path / "mdsite.yaml").write_text("content_dir: site/content\nworkers: 4\n")
    settings = load_config()
    assert settings.content_dir == "site/content"
    assert settings.workers == 4


def test_load_config_env_overrides_yaml(tmp_path, monkeypatch):
    """MDSITE_OUTPUT_DIR takes precedence over mdsite.yaml."""
    (tmp_path / "mdsite.yaml").write_text("output_dir: from-yaml\n")
    monkeypatch.setenv("MDSITE_OUTPUT_DIR", "from-env")
    assert load_config().output_dir == "from-env"


def test_load_config_env_coerced_to_int(monkeypatch):
    monkeypatch.setenv("MDSITE_WORDS_PER_MINUTE", "250")
    assert load_config().words_per_minute == 250


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDSITE_CONTENT_DIR", "env-content")
    assert load_config(overrides={"content_dir": "cli-content"}).content_dir == "cli-content"
    assert load_config(overrides={"content_dir": None}).content_dir == "env-content"


def test_load_config_log_level_case_insensitive():
    assert load_config(overrides={"log_level": "debug"}).log_level == "DEBUG"


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "mdsite.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid mdsite.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "mdsite.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_zero_wpm():
    with pytest.raises(ValueError):
        load_config(overrides={"words_per_minute": 0})
