from __future__ import annotations

import pytest

from hudsummary.config import ENV_API_KEY, ENV_PACKAGE_NAME, ENV_PORT, AppConfig

TEST_API_KEY = "test-key"


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(package_name="com.example.hudsummary", api_key=TEST_API_KEY)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv 후 delenv 해야 테스트 종료 시 load_dotenv가 넣은 값까지 원래대로 지워진다
    for name in (ENV_PACKAGE_NAME, ENV_API_KEY, ENV_PORT):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
