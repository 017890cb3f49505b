import pytest

from config import Settings
from scraper import AnimeScraper
from tests.fixtures import FakeUpstream


@pytest.fixture
def settings():
    return Settings(
        base_url="https://animecix.tv",
        api_base_url="https://animecix.tv/secure",
        fallback_ip="88.250.140.151",
        search_limit=8,
    )


@pytest.fixture
def scraper(settings):
    return AnimeScraper(settings)


@pytest.fixture
def upstream(scraper, monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(scraper, "_make_request", fake)
    return fake
