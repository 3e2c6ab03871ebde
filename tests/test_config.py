import pytest

from todoserver.config import Config, ConfigError, load_config

URL = "sqlite:///todos.db"


def test_missing_database_url_raises():
    with pytest.raises(ConfigError):
        load_config({"HOST": "127.0.0.1"})


def test_defaults_apply():
    config = load_config({"DATABASE_URL": URL})
    assert config == Config(database_url=URL, host="0.0.0.0", port=8080)


def test_default_values_are_fixed_by_source():
    config = load_config({"DATABASE_URL": URL})
    assert config.host == "0.0.0.0"
    assert config.port == 8080


def test_explicit_values_are_used():
    config = load_config({"DATABASE_URL": URL, "HOST": "127.0.0.1", "PORT": "3000"})
    assert config.database_url == URL
    assert config.host == "127.0.0.1"
    assert config.port == 3000


def test_plus_sign_is_accepted():
    assert load_config({"DATABASE_URL": URL, "PORT": "+3000"}).port == 3000


@pytest.mark.parametrize("port", ["abc", "", "-1", "70000", " 8080", "80.5"])
def test_invalid_port_raises(port):
    with pytest.raises(ConfigError):
        load_config({"DATABASE_URL": URL, "PORT": port})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", URL)
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.delenv("HOST", raising=False)
    config = load_config()
    assert (config.database_url, config.host, config.port) == (URL, "0.0.0.0", 9090)