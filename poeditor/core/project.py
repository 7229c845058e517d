from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from poeditor.core.dispatcher import encode_json_field
from poeditor.core.language import Language
from poeditor.errors import ValidationError
from poeditor.models.option_models import UPDATING_VALUES, UploadFile, UploadOptions
from poeditor.models.response_models import (
    ContributorListResult,
    CountResult,
    LanguageListResult,
    ProjectResult,
    TermCountResult,
    TermListResult,
    UploadResult,
)
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping
    from typing import IO

    from poeditor.core.client import POEditor
    from poeditor.core.dispatcher import Identity, RequestDispatcher
    from poeditor.models.project_models import Contributor, ProjectDetails
    from poeditor.models.term_models import Term

__all__: list[str] = ["UPDATABLE_FIELDS", "Project"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset({"name", "description", "reference_language"})


class Project:
    """Handle for one project.

    A handle only needs the project id; ``details`` is filled when the handle comes from a call
    that returned project metadata, and is never refreshed in place.

    Attributes:
        client (POEditor): The client the handle belongs to.
        id (int): Project id.
        details (ProjectDetails | None): Metadata snapshot, if known.
    """

    def __init__(self, client: POEditor, project_id: int, details: ProjectDetails | None = None) -> None:
        self.client: POEditor = client
        self.id: int = project_id
        self.details: ProjectDetails | None = details

    def __repr__(self) -> str:
        name: str = self.details.name if self.details else ""
        return f"Project(id={self.id!r}, name={name!r})"

    @property
    def identity(self) -> Identity:
        return self.client.identity.for_project(self.id)

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self.client.dispatcher

    def language(self, code: str) -> Language:
        """Return a handle for one of the project's languages without fetching it."""
        return Language(self, code)

    async def view(self) -> Project:
        """Fetch the project's details; returns a new handle carrying them."""
        res: ProjectResult = await self.dispatcher.dispatch("/projects/view", self.identity, result_type=ProjectResult)
        return Project(self.client, res.project.id, res.project)

    async def update(self, props: Mapping[str, str]) -> Project:
        """Update project settings.

        Only ``name``, ``description`` and ``reference_language`` can be updated; omitted keys are left unchanged.

        Raises:
            ValidationError: If ``props`` names any other field.
        """
        invalid: list[str] = sorted(set(props) - UPDATABLE_FIELDS)
        if invalid:
            msg: str = (
                f"Tried to update invalid field(s) {invalid}. Valid fields are {sorted(UPDATABLE_FIELDS)}"
            )
            raise ValidationError(msg)
        res: ProjectResult = await self.dispatcher.dispatch(
            "/projects/update", self.identity, dict(props), result_type=ProjectResult
        )
        return Project(self.client, res.project.id, res.project)

    async def delete(self) -> None:
        await self.dispatcher.dispatch("/projects/delete", self.identity)
        logger.info("Project %d deleted", self.id)

    async def upload(self, file: UploadFile | bytes | IO[bytes], options: UploadOptions) -> UploadResult:
        """Upload a translation file.

        Args:
            file (UploadFile | bytes | IO[bytes]): File content. Bare bytes or file objects are wrapped in an
                `UploadFile`; a file object's ``name`` is used as the filename when available.
            options (UploadOptions): Upload options.
        Returns:
            UploadResult: Counters for parsed, added and deleted terms and translations.
        Raises:
            ValidationError: If ``updating`` is unsupported, or a language is missing for a translation upload.
        """
        if options.updating not in UPDATING_VALUES:
            msg: str = f"Updating must be one of {', '.join(UPDATING_VALUES)}, got '{options.updating}'"
            raise ValidationError(msg)
        if options.updating != "terms" and not options.language:
            msg = "Language code is required when uploading translations"
            raise ValidationError(msg)

        fields: dict[str, str] = {"updating": options.updating}
        if options.language:
            fields["language"] = options.language
        if options.overwrite:
            fields["overwrite"] = "1"
        if options.sync_terms:
            fields["sync_terms"] = "1"
        if options.tags:
            fields["tags"] = encode_json_field(list(options.tags))
        if options.read_from_source:
            fields["read_from_source"] = "1"
        if options.fuzzy_trigger:
            fields["fuzzy_trigger"] = "1"

        return await self.dispatcher.dispatch(
            "/projects/upload",
            self.identity,
            fields,
            {"file": self._as_upload_file(file)},
            result_type=UploadResult,
        )

    @staticmethod
    def _as_upload_file(file: UploadFile | bytes | IO[bytes]) -> UploadFile:
        if isinstance(file, UploadFile):
            return file
        if isinstance(file, (bytes, bytearray)):
            return UploadFile(content=bytes(file))
        name: Any = getattr(file, "name", None)
        if isinstance(name, str) and name:
            return UploadFile(content=file, filename=name.replace("\\", "/").rsplit("/", 1)[-1])
        return UploadFile(content=file)

    async def sync_terms(self, terms: Iterable[Term]) -> CountResult:
        """Replace the project's terms with ``terms``; terms not listed are deleted."""
        data: list[dict[str, Any]] = [term.to_payload() for term in terms]
        res: TermCountResult = await self.dispatcher.dispatch(
            "/projects/sync", self.identity, {"data": encode_json_field(data)}, result_type=TermCountResult
        )
        return res.terms

    async def list_languages(self) -> list[Language]:
        res: LanguageListResult = await self.dispatcher.dispatch(
            "/languages/list", self.identity, result_type=LanguageListResult
        )
        return [Language(self, details.code, details) for details in res.languages]

    async def add_language(self, code: str) -> Language:
        """Add a language to the project and return its handle."""
        await self.dispatcher.dispatch("/languages/add", self.identity, {"language": code})
        return Language(self, code)

    async def list_terms(self) -> list[Term]:
        """List the project's terms without translations."""
        res: TermListResult = await self.dispatcher.dispatch("/terms/list", self.identity, result_type=TermListResult)
        return res.terms

    async def add_terms(self, terms: Iterable[Term]) -> CountResult:
        return await self._write_terms("/terms/add", [term.to_payload() for term in terms])

    async def update_terms(self, terms: Iterable[Term], *, fuzzy_trigger: bool = False) -> CountResult:
        """Update terms matched by their ``(term, context)`` key."""
        extra: dict[str, str] = {"fuzzy_trigger": "1"} if fuzzy_trigger else {}
        return await self._write_terms("/terms/update", [term.to_payload() for term in terms], extra)

    async def delete_terms(self, terms: Iterable[Term]) -> CountResult:
        return await self._write_terms("/terms/delete", [term.to_key_payload() for term in terms])

    async def add_comments(self, terms: Iterable[Term]) -> CountResult:
        """Add each term's ``comment`` to the matching term."""
        return await self._write_terms("/terms/add_comment", [term.to_comment_payload() for term in terms])

    async def _write_terms(
        self, endpoint: str, data: list[dict[str, Any]], extra: Mapping[str, str] | None = None
    ) -> CountResult:
        fields: dict[str, str] = {"data": encode_json_field(data), **(extra or {})}
        res: TermCountResult = await self.dispatcher.dispatch(
            endpoint, self.identity, fields, result_type=TermCountResult
        )
        return res.terms

    async def list_contributors(self) -> list[Contributor]:
        res: ContributorListResult = await self.dispatcher.dispatch(
            "/contributors/list", self.identity, result_type=ContributorListResult
        )
        return res.contributors

    async def add_admin(self, name: str, email: str) -> None:
        """Add a user as project administrator."""
        await self.dispatcher.dispatch(
            "/contributors/add", self.identity, {"name": name, "email": email, "admin": "1"}
        )

    async def remove_contributor(self, email: str) -> None:
        """Remove a user from the project."""
        await self.dispatcher.dispatch("/contributors/remove", self.identity, {"email": email})
