from pyosm.config import ApiConfig, get_config


def test_defaults():
    config = get_config()
    assert config.root == "https://api.openstreetmap.org/api/0.6"
    assert config.timeout == 2


def test_from_env(monkeypatch):
    monkeypatch.setenv("PYOSM_API_URL", "https://master.apis.dev.openstreetmap.org/api/")
    monkeypatch.setenv("PYOSM_TIMEOUT", "10")
    config = ApiConfig.from_env()
    assert config.root == "https://master.apis.dev.openstreetmap.org/api/0.6"
    assert config.timeout == 10.0
    assert config.user_agent == ApiConfig().user_agent
