import pytest

from mpesa_sdk.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "MPESA_CONFIRMATION_URL",
        "MPESA_TIMEOUT_SECONDS",
        "MPESA_ACCESS_TOKEN",
        "MPESA_COLLECT_ALL_ERRORS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsFromEnv:
    """Tests for Settings.from_env()."""

    @pytest.mark.unit
    def test_defaults(self, clean_env):
        """With no MPESA_* variables set, from_env() returns the defaults."""
        settings = Settings.from_env()
        assert settings == Settings()
        assert settings.timeout_seconds == 30
        assert settings.access_token is None
        assert settings.collect_all_errors is False

    @pytest.mark.unit
    def test_reads_environment(self, clean_env):
        """Every MPESA_* variable is read, and the URL is stripped."""
        clean_env.setenv("MPESA_CONFIRMATION_URL", " https://merchant.test/confirm ")
        clean_env.setenv("MPESA_TIMEOUT_SECONDS", "2.5")
        clean_env.setenv("MPESA_ACCESS_TOKEN", "secret-token")
        clean_env.setenv("MPESA_COLLECT_ALL_ERRORS", "true")

        settings = Settings.from_env()

        assert settings.confirmation_url == "https://merchant.test/confirm"
        assert settings.timeout_seconds == 2.5
        assert settings.access_token == "secret-token"
        assert settings.collect_all_errors is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("YES", True), ("0", False), ("no", False)])
    def test_collect_all_flag_values(self, clean_env, value, expected):
        """Only 1/true/yes, in any case, turn collect-all on."""
        clean_env.setenv("MPESA_COLLECT_ALL_ERRORS", value)
        assert Settings.from_env().collect_all_errors is expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_invalid_timeout_raises(self, clean_env, value):
        """A timeout that is non-numeric or not positive raises ValueError."""
        clean_env.setenv("MPESA_TIMEOUT_SECONDS", value)
        with pytest.raises(ValueError, match="MPESA_TIMEOUT_SECONDS"):
            Settings.from_env()

    @pytest.mark.unit
    def test_empty_access_token_is_none(self, clean_env):
        """An empty MPESA_ACCESS_TOKEN means no token."""
        clean_env.setenv("MPESA_ACCESS_TOKEN", "")
        assert Settings.from_env().access_token is None
