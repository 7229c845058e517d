from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, Any

import pytest

from poeditor.core.client import POEditor
from poeditor.core.project import Project
from poeditor.errors import ValidationError
from poeditor.models.option_models import UploadFile, UploadOptions
from poeditor.models.term_models import Term

if TYPE_CHECKING:
    from collections.abc import Mapping

    from poeditor.models.response_models import CountResult, UploadResult


class FakeHttp:
    def __init__(self, *results: Any) -> None:
        self.bodies: list[bytes] = [
            json.dumps({"response": {"status": "success", "code": "200", "message": "OK"}, "result": r}).encode()
            for r in results
        ]
        self.calls: list[dict[str, Any]] = []

    async def post_form(
        self, *, url: str, fields: Mapping[str, str], files: Mapping[str, UploadFile] | None = None
    ) -> bytes:
        self.calls.append({"url": url, "fields": dict(fields), "files": dict(files or {})})
        return self.bodies.pop(0)


def _project(*results: Any, project_id: int = 42) -> tuple[Project, FakeHttp]:
    poe = POEditor("T")
    http = FakeHttp(*results)
    poe.dispatcher.http = http  # type: ignore[assignment]
    return poe.project(project_id), http


@pytest.mark.asyncio
async def test_add_terms_sends_data_and_returns_counts() -> None:
    project, http = _project({"terms": {"parsed": 1, "added": 1}})
    counts: CountResult = await project.add_terms([Term("hello")])

    assert (counts.parsed, counts.added, counts.deleted) == (1, 1, 0)
    call: dict[str, Any] = http.calls[0]
    assert call["url"] == "https://api.poeditor.com/v2/terms/add"
    assert call["fields"]["api_token"] == "T"
    assert call["fields"]["id"] == "42"
    assert json.loads(call["fields"]["data"]) == [{"term": "hello"}]
    assert call["files"] == {}


@pytest.mark.asyncio
async def test_update_terms_with_fuzzy_trigger() -> None:
    project, http = _project({"terms": {"parsed": 1, "updated": 1}})
    counts: CountResult = await project.update_terms([Term("hello", context="greeting")], fuzzy_trigger=True)
    assert counts.updated == 1
    assert http.calls[0]["fields"]["fuzzy_trigger"] == "1"
    assert json.loads(http.calls[0]["fields"]["data"]) == [{"term": "hello", "context": "greeting"}]


@pytest.mark.asyncio
async def test_delete_terms_sends_only_keys() -> None:
    project, http = _project({"terms": {"parsed": 1, "deleted": 1}})
    await project.delete_terms([Term("hello", context="greeting", reference="a.py", tags=("x",))])
    assert http.calls[0]["url"].endswith("/terms/delete")
    assert json.loads(http.calls[0]["fields"]["data"]) == [{"term": "hello", "context": "greeting"}]


@pytest.mark.asyncio
async def test_add_comments() -> None:
    project, http = _project({"terms": {"parsed": 1, "added": 1}})
    await project.add_comments([Term("hello", comment="Greeting on the start page")])
    assert http.calls[0]["url"].endswith("/terms/add_comment")
    assert json.loads(http.calls[0]["fields"]["data"]) == [{"term": "hello", "comment": "Greeting on the start page"}]


@pytest.mark.asyncio
async def test_sync_terms() -> None:
    project, http = _project({"terms": {"parsed": 2, "added": 1, "updated": 0, "deleted": 5}})
    counts: CountResult = await project.sync_terms([Term("a"), Term("b", tags=("ui",))])
    assert counts.deleted == 5
    assert http.calls[0]["url"].endswith("/projects/sync")
    assert json.loads(http.calls[0]["fields"]["data"]) == [{"term": "a"}, {"term": "b", "tags": ["ui"]}]


@pytest.mark.asyncio
async def test_caller_fields_cannot_override_project_id() -> None:
    project, http = _project({"project": {"id": 42, "name": "Renamed"}})
    await project.update({"name": "Renamed"})
    assert http.calls[0]["fields"]["id"] == "42"

    project, http = _project(None)
    await project.dispatcher.dispatch("/projects/delete", project.identity, {"id": "999"})
    assert http.calls[0]["fields"]["id"] == "42"


@pytest.mark.asyncio
async def test_view_returns_handle_with_details() -> None:
    project, _ = _project(
        {"project": {"id": 42, "name": "App", "public": 0, "open": 0, "reference_language": "en", "terms": 3}}
    )
    viewed: Project = await project.view()
    assert viewed.id == 42
    assert viewed.details is not None
    assert viewed.details.reference_language == "en"
    assert project.details is None


@pytest.mark.asyncio
async def test_update_rejects_unknown_fields_without_request() -> None:
    project, http = _project()
    with pytest.raises(ValidationError):
        await project.update({"name": "x", "public": "1"})
    assert http.calls == []


@pytest.mark.asyncio
async def test_upload_terms_with_options() -> None:
    project, http = _project({"terms": {"parsed": 2, "added": 2}, "translations": {"parsed": 0}})
    res: UploadResult = await project.upload(
        UploadFile(b'msgid "hello"\nmsgstr ""\n', filename="messages.pot"),
        UploadOptions(updating="terms", sync_terms=True, tags=("new",)),
    )
    assert res.terms.added == 2
    call: dict[str, Any] = http.calls[0]
    assert call["url"].endswith("/projects/upload")
    assert call["fields"]["updating"] == "terms"
    assert call["fields"]["sync_terms"] == "1"
    assert json.loads(call["fields"]["tags"]) == ["new"]
    assert "language" not in call["fields"]
    assert "overwrite" not in call["fields"]
    assert call["files"]["file"].filename == "messages.pot"


@pytest.mark.asyncio
async def test_upload_translations_from_file_object() -> None:
    project, http = _project({"terms": {}, "translations": {"parsed": 1, "added": 1}})
    stream = io.BytesIO(b"{}")
    stream.name = "/tmp/exports/fr.json"
    await project.upload(stream, UploadOptions(updating="translations", language="fr", overwrite=True))
    call: dict[str, Any] = http.calls[0]
    assert call["fields"]["language"] == "fr"
    assert call["fields"]["overwrite"] == "1"
    assert call["files"]["file"].filename == "fr.json"
    assert call["files"]["file"].content is stream


@pytest.mark.asyncio
async def test_upload_rejects_unknown_updating_without_request() -> None:
    project, http = _project()
    with pytest.raises(ValidationError):
        await project.upload(b"", UploadOptions(updating="bogus"))
    assert http.calls == []


@pytest.mark.parametrize("updating", ["translations", "terms_translations"])
@pytest.mark.asyncio
async def test_upload_translations_requires_language(updating: str) -> None:
    project, http = _project()
    with pytest.raises(ValidationError):
        await project.upload(b"", UploadOptions(updating=updating))
    assert http.calls == []


@pytest.mark.asyncio
async def test_write_terms_with_empty_comment_raises_before_request() -> None:
    project, http = _project()
    with pytest.raises(ValidationError):
        await project.add_comments([Term("hello")])
    assert http.calls == []


@pytest.mark.asyncio
async def test_list_languages_returns_handles() -> None:
    project, http = _project(
        {
            "languages": [
                {"name": "French", "code": "fr", "translations": 3, "percentage": 100, "updated": ""},
                {"name": "German", "code": "de", "translations": 0, "percentage": 0, "updated": ""},
            ]
        }
    )
    languages = await project.list_languages()
    assert [language.code for language in languages] == ["fr", "de"]
    assert languages[0].project is project
    assert languages[0].details is not None
    assert http.calls[0]["url"].endswith("/languages/list")


@pytest.mark.asyncio
async def test_add_language_and_delete() -> None:
    project, http = _project(None, None)
    language = await project.add_language("pt-br")
    assert language.code == "pt-br"
    assert http.calls[0]["fields"]["language"] == "pt-br"

    await project.delete()
    assert http.calls[1]["url"].endswith("/projects/delete")


@pytest.mark.asyncio
async def test_contributor_management() -> None:
    project, http = _project(None, None, {"contributors": []})
    await project.add_admin("Jane", "jane@example.com")
    await project.remove_contributor("jane@example.com")
    assert await project.list_contributors() == []
    assert http.calls[0]["fields"]["admin"] == "1"
    assert http.calls[1]["fields"] == {"api_token": "T", "id": "42", "email": "jane@example.com"}
    assert http.calls[2]["fields"]["id"] == "42"
