import pytest
from pytest import MonkeyPatch

from shortlinks.constants import ENV
from shortlinks.models import UrlMapping
from shortlinks.dao.base import UrlMappingBaseDAO
from shortlinks.dao.exceptions import UrlMappingNotFoundError


class FakeUrlMappingDAO(UrlMappingBaseDAO):
    """In-memory Mapping Store with the same contract as the DynamoDB DAO."""

    def __init__(self):
        self.items: dict[str, str] = {}

    def put(self, mapping: UrlMapping, **kwargs) -> 'FakeUrlMappingDAO':
        self.items[mapping.short_id] = mapping.long_url
        return self

    def get(self, short_id: str, **kwargs) -> UrlMapping:
        if short_id not in self.items:
            raise UrlMappingNotFoundError(f"URL mapping with short ID '{short_id}' not found.")
        return UrlMapping(short_id=short_id, long_url=self.items[short_id])


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    """Run every test as if deployed (not under SAM / local mode)."""
    monkeypatch.delenv(ENV.App.APP_ENV, raising=False)
    monkeypatch.delenv(ENV.App.AWS_SAM_LOCAL, raising=False)
    monkeypatch.delenv(ENV.LocalStack.ENDPOINT, raising=False)


@pytest.fixture
def fake_dao() -> FakeUrlMappingDAO:
    return FakeUrlMappingDAO()
