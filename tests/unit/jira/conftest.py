"""
Test fixtures for Jira unit tests.

Provides JiraConfig factories, a Jira auth environment and a JiraFetcher
whose underlying ``atlassian.Jira`` client is a MagicMock.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from command_hub.jira import JiraFetcher
from command_hub.jira.config import JiraConfig
from tests.utils.factories import AuthConfigFactory, JiraIssueFactory


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://custom.atlassian.net")
            assert config.url == "https://custom.atlassian.net"
    """

    def _create_config(**overrides):
        auth_config = AuthConfigFactory.create_basic_auth_config()
        defaults = {
            "url": auth_config["url"],
            "auth_type": "basic",
            "username": auth_config["username"],
            "api_token": auth_config["api_token"],
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Standard Cloud JiraConfig."""
    return jira_config_factory()


@pytest.fixture
def jira_auth_environment():
    """Jira Cloud authentication environment variables."""
    auth_config = AuthConfigFactory.create_basic_auth_config()
    jira_env = {
        "JIRA_URL": auth_config["url"],
        "JIRA_USERNAME": auth_config["username"],
        "JIRA_API_TOKEN": auth_config["api_token"],
    }

    with patch.dict(os.environ, jira_env, clear=True):
        yield jira_env


@pytest.fixture
def mock_atlassian_jira():
    """MagicMock standing in for ``atlassian.Jira``."""
    mock_jira = MagicMock()
    mock_jira.issue.return_value = JiraIssueFactory.create()
    mock_jira.create_issue.return_value = {
        "id": "10001",
        "key": "FRON-1400",
        "self": "https://test.atlassian.net/rest/api/3/issue/10001",
    }
    mock_jira.user_find_by_user_string.return_value = [
        {"accountId": "account-123", "displayName": "Test User"}
    ]
    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """JiraFetcher with the Atlassian client replaced by a mock."""
    with patch("command_hub.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        fetcher = JiraFetcher(config=mock_config)
        yield fetcher
