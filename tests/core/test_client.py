from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any

import pytest

from poeditor.core.client import POEditor
from poeditor.errors import APIError, ValidationError
from poeditor.models.config_models import Config
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path

    from poeditor.core.project import Project


class FakeHttp:
    def __init__(self, *bodies: dict[str, Any]) -> None:
        self.bodies: list[bytes] = [json.dumps(body).encode() for body in bodies]
        self.calls: list[dict[str, Any]] = []
        self.closed_calls: int = 0

    async def post_form(self, *, url: str, fields: Mapping[str, str], files: Mapping[str, Any] | None = None) -> bytes:
        self.calls.append({"url": url, "fields": dict(fields), "files": files})
        return self.bodies.pop(0)

    async def close(self) -> None:
        self.closed_calls += 1


def _ok(result: Any = None) -> dict[str, Any]:
    return {"response": {"status": "success", "code": "200", "message": "OK"}, "result": result}


def _client(*bodies: dict[str, Any], **kwargs: Any) -> tuple[POEditor, FakeHttp]:
    poe = POEditor("T", **kwargs)
    http = FakeHttp(*bodies)
    poe.dispatcher.http = http  # type: ignore[assignment]
    poe.http = http  # type: ignore[assignment]
    return poe, http


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValidationError):
        POEditor("")


def test_project_handle_does_not_send_requests() -> None:
    poe, http = _client()
    project: Project = poe.project(42)
    assert project.id == 42
    assert project.identity.fields() == {"api_token": "T", "id": "42"}
    assert http.calls == []


@pytest.mark.asyncio
async def test_list_projects() -> None:
    poe, http = _client(
        _ok(
            {
                "projects": [
                    {"id": 7717, "name": "Demo", "public": 0, "open": 0, "created": "2013-06-10T11:08:54+0000"},
                    {"id": 7718, "name": "Other", "public": 1, "open": 0, "created": ""},
                ]
            }
        )
    )
    projects: list[Project] = await poe.list_projects()
    assert [p.id for p in projects] == [7717, 7718]
    assert projects[1].details is not None
    assert projects[1].details.public is True
    assert http.calls[0]["fields"] == {"api_token": "T"}
    assert http.calls[0]["url"] == "https://api.poeditor.com/v2/projects/list"


@pytest.mark.asyncio
async def test_add_and_view_project() -> None:
    created: dict[str, Any] = {"id": 9, "name": "New", "description": "d", "public": 0, "open": 0}
    poe, http = _client(_ok({"project": created}), _ok({"project": created}))
    project: Project = await poe.add_project("New", "d")
    assert project.id == 9
    assert http.calls[0]["fields"] == {"name": "New", "description": "d", "api_token": "T"}

    viewed: Project = await poe.view_project(9)
    assert viewed.details is not None
    assert viewed.details.name == "New"
    assert http.calls[1]["fields"]["id"] == "9"


@pytest.mark.asyncio
async def test_available_languages_and_contributors() -> None:
    poe, _ = _client(
        _ok({"languages": [{"name": "English", "code": "en"}, {"name": "French", "code": "fr"}]}),
        _ok({"contributors": [{"name": "Admin", "email": "a@example.com", "permissions": [{"type": "administrator"}]}]}),
    )
    languages = await poe.available_languages()
    assert [language.code for language in languages] == ["en", "fr"]
    contributors = await poe.list_contributors()
    assert contributors[0].is_admin


@pytest.mark.asyncio
async def test_api_error_is_raised_to_caller() -> None:
    poe, _ = _client({"response": {"status": "fail", "code": "4011", "message": "Invalid API Token"}})
    with pytest.raises(APIError, match="4011"):
        await poe.list_projects()


@pytest.mark.asyncio
async def test_debug_logs_response_bodies(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="POEditor.dump")
    poe, _ = _client(_ok({"projects": []}), debug=True)
    await poe.list_projects()
    dumps: list[logging.LogRecord] = [rec for rec in caplog.records if rec.name == "POEditor.dump"]
    assert len(dumps) == 1
    assert '"projects": []' in dumps[0].getMessage()


@pytest.mark.asyncio
async def test_custom_dump_sink() -> None:
    dumped: list[str] = []
    poe, _ = _client(_ok({"projects": []}), dump_sink=dumped.append)
    await poe.list_projects()
    assert len(dumped) == 1
    assert json.loads(dumped[0])["result"] == {"projects": []}


@pytest.mark.asyncio
async def test_context_manager_closes_transport() -> None:
    poe, http = _client()
    async with poe:
        pass
    assert http.closed_calls == 1


def test_from_config() -> None:
    config = Config()
    config.POEDITOR.API_TOKEN = "T"
    config.POEDITOR.BASE_URL = "https://example.test/v2"
    config.POEDITOR.TIMEOUT = 30.0
    config.GENERAL.DEBUG = True
    poe: POEditor = POEditor.from_config(config, configure_logging=False)
    assert poe.identity.api_token == "T"
    assert poe.dispatcher.base_url == "https://example.test/v2"
    assert poe.http.total_timeout == 30.0
    assert poe.dispatcher.dump_sink is not None


@pytest.fixture
def fresh_logger_utils(monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    namespace = "POEditorClientTest"
    monkeypatch.setattr(LoggerUtils, "_instance", None)
    monkeypatch.setattr(LoggerUtils, "_configured", False)
    monkeypatch.setattr(LoggerUtils, "_LOGGER_NAMESPACE", namespace)
    yield namespace
    namespace_logger: logging.Logger = logging.getLogger(namespace)
    for handler in list(namespace_logger.handlers):
        namespace_logger.removeHandler(handler)
        handler.close()


def test_from_config_applies_logging_section(fresh_logger_utils: str, tmp_path: Path) -> None:
    config = Config()
    config.POEDITOR.API_TOKEN = "T"
    config.LOGGING.FILE = str(tmp_path / "poeditor.log")
    config.LOGGING.LEVEL = "DEBUG"

    POEditor.from_config(config)

    namespace_logger: logging.Logger = logging.getLogger(fresh_logger_utils)
    assert namespace_logger.level == logging.DEBUG
    files: list[logging.Handler] = [h for h in namespace_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(files) == 1
    assert files[0].baseFilename == str(tmp_path / "poeditor.log")


def test_from_config_without_file_adds_no_file_handler(fresh_logger_utils: str) -> None:
    config = Config()
    config.POEDITOR.API_TOKEN = "T"
    config.LOGGING.LEVEL = "WARNING"

    POEditor.from_config(config)

    namespace_logger: logging.Logger = logging.getLogger(fresh_logger_utils)
    assert namespace_logger.level == logging.WARNING
    assert not any(isinstance(h, RotatingFileHandler) for h in namespace_logger.handlers)
