"""Tests for the socialplus command-line interface."""

import json
from pathlib import Path

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from socialplus import SocialPlusClient, cli
from socialplus.config import ServiceConfig, load_config

runner = CliRunner()

ACTIVITY = {
    "activityHandle": "a1",
    "createdTime": "2024-05-01T12:30:00Z",
    "activityType": "Like",
    "actorUsers": [
        {
            "userHandle": "u1",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "visibility": "Public",
            "followerStatus": "None",
        }
    ],
    "totalActions": 1,
    "unread": True,
}


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep table cells on one line so output can be matched."""
    monkeypatch.setattr(cli, "console", Console(width=300))


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch):
    """Record setup_logging() calls instead of reconfiguring the root logger."""
    calls: list[dict] = []
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def mock_service(monkeypatch):
    """Route CLI clients to a MockTransport; returns the list of requests seen."""
    requests: list[httpx.Request] = []
    responses: dict[str, dict] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=responses[request.url.path])

    def make_client(config):
        config = config.model_copy(
            update={"service": ServiceConfig(retry_backoff_seconds=0)}
        )
        return SocialPlusClient(
            config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
        )

    monkeypatch.setattr(cli, "_make_client", make_client)
    return requests, responses


class TestInit:
    def test_writes_loadable_config(self, tmp_path: Path) -> None:
        result = runner.invoke(cli.app, ["init", "--path", str(tmp_path)])

        assert result.exit_code == 0
        config = load_config(tmp_path / "socialplus.toml")
        assert config.api_root == "https://api.embeddedsocial.microsoft.com/v0.7"

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        (tmp_path / "socialplus.toml").write_text("# mine\n")

        result = runner.invoke(cli.app, ["init", "--path", str(tmp_path)])

        assert result.exit_code == 1
        assert (tmp_path / "socialplus.toml").read_text() == "# mine\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        (tmp_path / "socialplus.toml").write_text("# mine\n")

        result = runner.invoke(cli.app, ["init", "--path", str(tmp_path), "--force"])

        assert result.exit_code == 0
        assert "[service]" in (tmp_path / "socialplus.toml").read_text()

    def test_bad_base_url(self, tmp_path: Path) -> None:
        result = runner.invoke(
            cli.app, ["init", "--path", str(tmp_path), "--base-url", "example.test"]
        )

        assert result.exit_code == 1
        assert "Error" in result.output


class TestCatalogCommands:
    def test_operations(self) -> None:
        result = runner.invoke(cli.app, ["operations"])

        assert result.exit_code == 0
        assert "Operations (83)" in result.output
        assert "Topics.get_popular_topics" in result.output

    def test_operations_for_one_group(self) -> None:
        result = runner.invoke(cli.app, ["operations", "--group", "mypins"])

        assert result.exit_code == 0
        assert "Operations (3)" in result.output
        assert "/users/me/pins/{topicHandle}" in result.output
        assert "Topics.get_topic" not in result.output

    def test_operations_unknown_group(self) -> None:
        result = runner.invoke(cli.app, ["operations", "--group", "Nope"])

        assert result.exit_code == 1

    def test_models(self) -> None:
        result = runner.invoke(cli.app, ["models"])

        assert result.exit_code == 0
        assert "FeedResponse[ActivityView]" in result.output
        assert "lastUpdatedTime, language" in result.output


class TestValidate:
    def test_valid_document(self, tmp_path: Path) -> None:
        path = tmp_path / "activity.json"
        path.write_text(json.dumps(ACTIVITY))

        result = runner.invoke(cli.app, ["validate", "ActivityView", str(path)])

        assert result.exit_code == 0
        assert "valid ActivityView" in result.output

    def test_wire_name_lookup(self, tmp_path: Path) -> None:
        path = tmp_path / "feed.json"
        path.write_text(json.dumps({"data": [ACTIVITY], "cursor": "c"}))

        result = runner.invoke(cli.app, ["validate", "FeedResponse[ActivityView]", str(path)])

        assert result.exit_code == 0

    def test_reports_field_path(self, tmp_path: Path) -> None:
        path = tmp_path / "feed.json"
        broken = dict(ACTIVITY, activityType="Loved")
        path.write_text(json.dumps({"data": [ACTIVITY, broken], "cursor": "c"}))

        result = runner.invoke(cli.app, ["validate", "FeedResponseActivityView", str(path)])

        assert result.exit_code == 1
        assert "data[1].activityType" in result.output
        assert "FollowAccept" in result.output

    def test_unknown_model(self, tmp_path: Path) -> None:
        path = tmp_path / "x.json"
        path.write_text("{}")

        result = runner.invoke(cli.app, ["validate", "NoSuchView", str(path)])

        assert result.exit_code == 1
        assert "Unknown model type" in result.output

    def test_not_json(self, tmp_path: Path) -> None:
        path = tmp_path / "x.json"
        path.write_text("not json")

        result = runner.invoke(cli.app, ["validate", "ActivityView", str(path)])

        assert result.exit_code == 1


class TestServiceCommands:
    def test_build_info(self, tmp_path: Path, mock_service) -> None:
        requests, responses = mock_service
        responses["/v0.7/builds/current"] = {
            "commitHash": "abc123",
            "branchName": "master",
            "serviceApiVersion": "v0.7",
        }

        result = runner.invoke(
            cli.app, ["build-info", "--config", str(tmp_path / "missing.toml")]
        )

        assert result.exit_code == 0
        assert "abc123" in result.output
        assert "master" in result.output
        assert len(requests) == 1

    def test_topics(self, tmp_path: Path, mock_service) -> None:
        requests, responses = mock_service
        responses["/v0.7/topics"] = {
            "data": [
                {
                    "topicHandle": "t1",
                    "createdTime": "2024-05-01T12:30:00Z",
                    "publisherType": "App",
                    "text": "Welcome to the app",
                    "totalLikes": 5,
                    "totalComments": 2,
                    "liked": False,
                    "pinned": True,
                }
            ],
            "cursor": "",
        }

        result = runner.invoke(
            cli.app, ["topics", "-n", "5", "--config", str(tmp_path / "missing.toml")]
        )

        assert result.exit_code == 0
        assert "Welcome to the app" in result.output
        assert "2024-05-01 12:30" in result.output
        assert requests[0].url.params["limit"] == "5"

    def test_service_error(self, tmp_path: Path, mock_service) -> None:
        # No canned response for the path: the handler fails
        result = runner.invoke(
            cli.app, ["build-info", "--config", str(tmp_path / "missing.toml")]
        )

        assert result.exit_code == 1
        assert "Error" in result.output


class TestLoggingConfig:
    """Service commands log the way the [logging] section says."""

    BUILD = {"commitHash": "abc123"}

    def write_config(self, tmp_path: Path) -> Path:
        log_file = tmp_path / "logs" / "socialplus.log"
        path = tmp_path / "socialplus.toml"
        path.write_text(
            f'[logging]\nlevel = "DEBUG"\nlog_file = "{log_file.as_posix()}"\n',
            encoding="utf-8",
        )
        return path

    def test_config_level_and_file(self, tmp_path: Path, mock_service, logging_calls) -> None:
        _, responses = mock_service
        responses["/v0.7/builds/current"] = self.BUILD

        result = runner.invoke(cli.app, ["build-info", "--config", str(self.write_config(tmp_path))])

        assert result.exit_code == 0
        assert logging_calls == [
            {"level": "DEBUG", "log_file": tmp_path / "logs" / "socialplus.log"}
        ]

    def test_option_overrides_config_level(
        self, tmp_path: Path, mock_service, logging_calls
    ) -> None:
        _, responses = mock_service
        responses["/v0.7/topics"] = {"data": [], "cursor": ""}

        result = runner.invoke(
            cli.app,
            ["topics", "--log-level", "ERROR", "--config", str(self.write_config(tmp_path))],
        )

        assert result.exit_code == 0
        assert logging_calls[0]["level"] == "ERROR"
        assert logging_calls[0]["log_file"] == tmp_path / "logs" / "socialplus.log"

    def test_defaults_without_config(self, tmp_path: Path, mock_service, logging_calls) -> None:
        _, responses = mock_service
        responses["/v0.7/builds/current"] = self.BUILD

        result = runner.invoke(cli.app, ["build-info", "--config", str(tmp_path / "missing.toml")])

        assert result.exit_code == 0
        assert logging_calls == [{"level": "INFO", "log_file": None}]
