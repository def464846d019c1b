import pytest
from hashset import ENV_HASHSET_SORTED_STR


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	monkeypatch.delenv(ENV_HASHSET_SORTED_STR, raising=False)
	yield
