import pytest

from payments_query.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SERVICE_NAME", "LOG_LEVEL", "TIMEZONE"):
        monkeypatch.delenv(f"PAYMENTS_QUERY_{name}", raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.service_name == "payments-query"
        assert settings.log_level == "INFO"
        assert settings.timezone == "UTC"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENTS_QUERY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PAYMENTS_QUERY_TIMEZONE", "Europe/Warsaw")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.timezone == "Europe/Warsaw"

    def test_ignores_unprefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert Settings(_env_file=None).log_level == "INFO"
