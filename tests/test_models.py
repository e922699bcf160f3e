"""Tests for the client configuration model."""

import base64

import pytest

from jirarest.errors import ConfigurationError, ErrorKind
from jirarest.models import ClientConfig, DEFAULT_TIMEOUT


class TestClientConfig:
    """Tests for the ClientConfig model."""

    def test_defaults(self):
        """Test default timeout and trailing slash handling."""
        config = ClientConfig("https://jira.example.com/", "alice", "secret")

        assert config.url == "https://jira.example.com"
        assert config.timeout == DEFAULT_TIMEOUT == 10.0
        assert config.is_configured()

    def test_password_hidden_from_repr(self):
        """Test the password does not leak through repr."""
        config = ClientConfig("https://jira.example.com", "alice", "s3cr3t")
        assert "s3cr3t" not in repr(config)

    def test_auth_header(self):
        """Test the Basic authorization header value."""
        config = ClientConfig("https://jira.example.com", "alice", "secret")
        expected = "Basic " + base64.b64encode(b"alice:secret").decode()
        assert config.auth_header() == expected

    def test_auth_header_deterministic(self):
        """Test identical credentials yield identical headers."""
        first = ClientConfig("https://jira.example.com", "alice", "secret")
        second = ClientConfig("https://other.example.com", "alice", "secret")
        assert first.auth_header() == second.auth_header()

    def test_auth_header_differs_per_credentials(self):
        """Test different credentials yield different headers."""
        alice = ClientConfig("https://jira.example.com", "alice", "secret")
        bob = ClientConfig("https://jira.example.com", "bob", "secret")
        other_pw = ClientConfig("https://jira.example.com", "alice", "secret2")
        assert alice.auth_header() != bob.auth_header()
        assert alice.auth_header() != other_pw.auth_header()

    def test_auth_header_non_ascii(self):
        """Test credentials are encoded as UTF-8."""
        config = ClientConfig("https://jira.example.com", "jürgen", "pässwörd")
        encoded = config.auth_header().removeprefix("Basic ")
        assert base64.b64decode(encoded).decode("utf-8") == "jürgen:pässwörd"

    def test_auth_header_unencodable(self):
        """Test unencodable credentials are a configuration error."""
        config = ClientConfig("https://jira.example.com", "alice", "\ud800")
        with pytest.raises(ConfigurationError) as exc_info:
            config.auth_header()
        assert exc_info.value.kind is ErrorKind.CONFIGURATION

    @pytest.mark.parametrize(
        "url",
        ["", "jira.example.com", "ftp://jira.example.com", "https://jira.example.com/?a=1"],
    )
    def test_invalid_url(self, url):
        """Test unusable base URLs are rejected."""
        with pytest.raises(ConfigurationError):
            ClientConfig(url, "alice", "secret")

    def test_invalid_timeout(self):
        """Test non-positive timeouts are rejected."""
        with pytest.raises(ConfigurationError):
            ClientConfig("https://jira.example.com", "alice", "secret", timeout=0)

    def test_to_dict_and_back(self):
        """Test serialization round-trip."""
        config = ClientConfig("https://jira.example.com", "alice", "secret", 2.5)
        assert ClientConfig.from_dict(config.to_dict()) == config

    def test_from_dict_missing_key(self):
        """Test a missing key is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            ClientConfig.from_dict({"url": "https://jira.example.com", "username": "a"})
        assert "password" in str(exc_info.value)

    def test_from_env(self):
        """Test loading from environment variables."""
        config = ClientConfig.from_env(
            {
                "JIRA_URL": "https://jira.example.com",
                "JIRA_USERNAME": "alice",
                "JIRA_PASSWORD": "secret",
                "JIRA_TIMEOUT": "3",
            }
        )
        assert config.url == "https://jira.example.com"
        assert config.username == "alice"
        assert config.timeout == 3.0

    def test_from_env_default_timeout(self, monkeypatch):
        """Test the process environment is used when none is given."""
        monkeypatch.setenv("JIRA_URL", "https://jira.example.com")
        monkeypatch.setenv("JIRA_USERNAME", "alice")
        monkeypatch.setenv("JIRA_PASSWORD", "secret")
        monkeypatch.delenv("JIRA_TIMEOUT", raising=False)

        config = ClientConfig.from_env()
        assert config.timeout == DEFAULT_TIMEOUT

    def test_from_env_missing(self):
        """Test missing variables are reported together."""
        with pytest.raises(ConfigurationError) as exc_info:
            ClientConfig.from_env({"JIRA_URL": "https://jira.example.com"})
        assert "JIRA_USERNAME" in str(exc_info.value)
        assert "JIRA_PASSWORD" in str(exc_info.value)

    def test_from_env_bad_timeout(self):
        """Test a non-numeric timeout is rejected."""
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env(
                {
                    "JIRA_URL": "https://jira.example.com",
                    "JIRA_USERNAME": "alice",
                    "JIRA_PASSWORD": "secret",
                    "JIRA_TIMEOUT": "soon",
                }
            )
