from __future__ import annotations

from typing import TYPE_CHECKING, Any

from poeditor.core.dispatcher import encode_json_field
from poeditor.models.option_models import FILE_FORMATS, FILTERS
from poeditor.models.response_models import (
    ContributorListResult,
    CountResult,
    ExportResult,
    TermListResult,
    TranslationCountResult,
)
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

    from poeditor.core.dispatcher import Identity, RequestDispatcher
    from poeditor.core.project import Project
    from poeditor.handlers.async_comm import BinarySink
    from poeditor.models.option_models import FileFormat, Filter
    from poeditor.models.project_models import Contributor, LanguageDetails
    from poeditor.models.term_models import Term

__all__: list[str] = ["Language"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def _inspect_keywords(kind: str, values: Iterable[str], defined: tuple[str, ...]) -> None:
    """Warn about keywords the service is not known to accept; they are still sent."""
    for value in values:
        if value not in defined:
            logger.warning("Unknown %s '%s'", kind, value)


class Language:
    """Handle for one language of a project.

    Attributes:
        project (Project): The owning project.
        code (str): Language code, e.g. ``"fr"`` or ``"pt-br"``.
        details (LanguageDetails | None): Metadata snapshot, if known.
    """

    def __init__(self, project: Project, code: str, details: LanguageDetails | None = None) -> None:
        self.project: Project = project
        self.code: str = code
        self.details: LanguageDetails | None = details

    def __repr__(self) -> str:
        return f"Language(project_id={self.project.id!r}, code={self.code!r})"

    @property
    def identity(self) -> Identity:
        return self.project.identity.for_language(self.code)

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self.project.dispatcher

    async def export_url(
        self,
        file_format: FileFormat | str,
        *,
        filters: Iterable[Filter | str] = (),
        tags: Iterable[str] = (),
    ) -> ExportResult:
        """Request an export and return its temporary download URL.

        Args:
            file_format (FileFormat | str): Export format, e.g. ``"po"``.
            filters (Iterable[Filter | str]): Only export terms matching all of these states.
            tags (Iterable[str]): Only export terms with these tags.
        """
        filter_list: list[str] = list(filters)
        tag_list: list[str] = list(tags)
        _inspect_keywords("file format", [file_format], FILE_FORMATS)
        _inspect_keywords("filter", filter_list, FILTERS)

        fields: dict[str, str] = {"type": file_format}
        if filter_list:
            fields["filters"] = encode_json_field(filter_list)
        if tag_list:
            fields["tags"] = encode_json_field(tag_list)
        return await self.dispatcher.dispatch("/projects/export", self.identity, fields, result_type=ExportResult)

    async def export(
        self,
        file_format: FileFormat | str,
        sink: BinarySink,
        *,
        filters: Iterable[Filter | str] = (),
        tags: Iterable[str] = (),
    ) -> ExportResult:
        """Export the language and write the file into ``sink``.

        The export request and the download are two separate requests. If the download fails, the
        sink may hold a partial file and `ExportDownloadError` is raised.

        Returns:
            ExportResult: The URL the file was downloaded from.
        """
        res: ExportResult = await self.export_url(file_format, filters=filters, tags=tags)
        written: int = await self.dispatcher.http.download(url=res.url, sink=sink)
        logger.info("Exported %s/%s as %s (%d bytes)", self.project.id, self.code, file_format, written)
        return res

    async def list_terms(self) -> list[Term]:
        """List the project's terms with their translation in this language."""
        res: TermListResult = await self.dispatcher.dispatch("/terms/list", self.identity, result_type=TermListResult)
        return res.terms

    async def add_translations(self, terms: Iterable[Term]) -> CountResult:
        """Add translations; each term must carry a `Translation`."""
        return await self._write_translations("/translations/add", [term.to_translation_payload() for term in terms])

    async def update_translations(self, terms: Iterable[Term], *, fuzzy_trigger: bool = False) -> CountResult:
        extra: dict[str, str] = {"fuzzy_trigger": "1"} if fuzzy_trigger else {}
        return await self._write_translations(
            "/translations/update", [term.to_translation_payload() for term in terms], extra
        )

    async def delete_translations(self, terms: Iterable[Term]) -> CountResult:
        return await self._write_translations("/translations/delete", [term.to_key_payload() for term in terms])

    async def _write_translations(
        self, endpoint: str, data: list[dict[str, Any]], extra: dict[str, str] | None = None
    ) -> CountResult:
        fields: dict[str, str] = {"data": encode_json_field(data), **(extra or {})}
        res: TranslationCountResult = await self.dispatcher.dispatch(
            endpoint, self.identity, fields, result_type=TranslationCountResult
        )
        return res.translations

    async def delete(self) -> None:
        """Remove the language from the project."""
        await self.dispatcher.dispatch("/languages/delete", self.identity)
        logger.info("Language %s removed from project %d", self.code, self.project.id)

    async def list_contributors(self) -> list[Contributor]:
        res: ContributorListResult = await self.dispatcher.dispatch(
            "/contributors/list", self.identity, result_type=ContributorListResult
        )
        return res.contributors

    async def add_contributor(self, name: str, email: str) -> None:
        """Add a user as contributor for this language."""
        await self.dispatcher.dispatch("/contributors/add", self.identity, {"name": name, "email": email})

    async def remove_contributor(self, email: str) -> None:
        await self.dispatcher.dispatch("/contributors/remove", self.identity, {"email": email})
