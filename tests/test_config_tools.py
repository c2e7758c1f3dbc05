import pytest

from src.generate_env import build_env, generate_env_file, render_env
from src.validate_config import check_config

def test_check_config_with_memory_backend():
    is_valid, messages, config = check_config()

    assert is_valid
    assert messages == []
    assert config["STORAGE_BACKEND"] == "memory"
    assert config["AZURE"]["TABLE_NAME"] == "Users"

def test_check_config_hides_connection_string(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "azure")
    monkeypatch.setenv("AZURE_STORAGE_CONNECTION_STRING", "UseDevelopmentStorage=true")

    is_valid, _, config = check_config()

    assert is_valid
    assert config["AZURE"]["CONNECTION_STRING"] == "<hidden>"

def test_check_config_reports_missing_credentials(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "azure")
    monkeypatch.delenv("AZURE_STORAGE_CONNECTION_STRING", raising=False)

    is_valid, messages, _ = check_config()

    assert not is_valid
    assert "Critical configuration errors found." in messages

def test_build_env_applies_environment_overrides():
    env_vars = build_env("test", {"PORT": "8080", "STORAGE_BACKEND": "azure", "EMPTY": None})

    assert env_vars["ENVIRONMENT"] == "test"
    assert env_vars["STORAGE_BACKEND"] == "memory"
    assert env_vars["PORT"] == "8080"
    assert env_vars["EMPTY"] == ""

def test_render_env_writes_key_value_lines():
    rendered = render_env(".env.test", {"ENVIRONMENT": "test", "PORT": "8080"})
    assert rendered.startswith("# Generated configuration for .env.test\n")
    assert rendered.endswith("ENVIRONMENT=test\nPORT=8080\n")

def test_generate_env_file_from_template(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.example").write_text("PORT=8080\nLOG_LEVEL=INFO\n")

    output = generate_env_file("production", force=True)

    content = (tmp_path / output).read_text()
    assert output == ".env.production"
    assert "ENVIRONMENT=production" in content
    assert "LOG_LEVEL=INFO" in content
    assert "PORT=8080" in content

def test_generate_env_file_requires_template(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        generate_env_file("staging")
