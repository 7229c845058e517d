"""The POEditor API client.

`POEditor` holds the API token and the transport, and exposes the calls that are not scoped to a
project. Project and language calls live on the `Project` and `Language` handles it hands out.

Example:
    async with POEditor("token") as poe:
        project = await poe.view_project(42)
        with open("fr.po", "wb") as f:
            await project.language("fr").export("po", f, filters=["translated"])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from poeditor.core.dispatcher import Identity, RequestDispatcher
from poeditor.core.project import Project
from poeditor.errors import ValidationError
from poeditor.handlers.async_comm import AsyncHttp
from poeditor.models.config_models import DEFAULT_BASE_URL
from poeditor.models.response_models import (
    ContributorListResult,
    LanguageListResult,
    ProjectListResult,
    ProjectResult,
)
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientSession

    from poeditor.models.config_models import Config
    from poeditor.models.project_models import Contributor, LanguageDetails

__all__: list[str] = ["POEditor"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)
dump_logger: logging.Logger = LoggerUtils.get_logger("dump")


def _log_response_body(body: str) -> None:
    dump_logger.info("%s", body)


class POEditor:
    """Entry point of the client.

    Args:
        api_token (str): POEditor API token.
        debug (bool): Log every raw response body to the ``POEditor.dump`` logger.
        dump_sink (Callable[[str], None] | None): Custom receiver for raw response bodies; implies debug.
        base_url (str): API base URL.
        timeout (float): Transport timeout in seconds; 0 disables it.
        session (ClientSession | None): Caller-owned aiohttp session to send requests with.

    Raises:
        ValidationError: If the token is empty.
    """

    def __init__(
        self,
        api_token: str,
        *,
        debug: bool = False,
        dump_sink: Callable[[str], None] | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 0.0,
        session: ClientSession | None = None,
    ) -> None:
        if not api_token:
            msg = "An API token is required"
            raise ValidationError(msg)
        logger.debug("Initializing %s", self.__class__.__name__)
        if dump_sink is None and debug:
            dump_sink = _log_response_body
        self.identity: Identity = Identity(api_token=api_token)
        self.http: AsyncHttp = AsyncHttp(session=session, total_timeout=timeout)
        self.dispatcher: RequestDispatcher = RequestDispatcher(self.http, base_url=base_url, dump_sink=dump_sink)

    @classmethod
    def from_config(
        cls, config: Config, *, session: ClientSession | None = None, configure_logging: bool = True
    ) -> Self:
        """Build a client from a loaded configuration.

        Args:
            config (Config): Loaded configuration.
            session (ClientSession | None): Caller-owned aiohttp session.
            configure_logging (bool): Set up `LoggerUtils` with ``LOGGING.FILE`` and ``LOGGING.LEVEL``.
                Pass False when the application configures logging itself.
        """
        if configure_logging:
            logger_utils = LoggerUtils(config.LOGGING.FILE)
            logger_utils.set_level(config.LOGGING.LEVEL)  # type: ignore[arg-type]
        return cls(
            config.POEDITOR.API_TOKEN,
            debug=config.GENERAL.DEBUG,
            base_url=config.POEDITOR.BASE_URL,
            timeout=config.POEDITOR.TIMEOUT,
            session=session,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    async def close(self) -> None:
        await self.http.close()

    def __repr__(self) -> str:
        return f"POEditor(base_url={self.dispatcher.base_url!r})"

    def project(self, project_id: int) -> Project:
        """Return a handle for a project without fetching it."""
        return Project(self, project_id)

    async def list_projects(self) -> list[Project]:
        """List the projects the token has access to."""
        res: ProjectListResult = await self.dispatcher.dispatch(
            "/projects/list", self.identity, result_type=ProjectListResult
        )
        return [Project(self, details.id, details) for details in res.projects]

    async def view_project(self, project_id: int) -> Project:
        """Fetch a project's details."""
        return await self.project(project_id).view()

    async def add_project(self, name: str, description: str = "") -> Project:
        """Create a project."""
        res: ProjectResult = await self.dispatcher.dispatch(
            "/projects/add",
            self.identity,
            {"name": name, "description": description},
            result_type=ProjectResult,
        )
        logger.info("Project %d created", res.project.id)
        return Project(self, res.project.id, res.project)

    async def available_languages(self) -> list[LanguageDetails]:
        """List every language the service supports."""
        res: LanguageListResult = await self.dispatcher.dispatch(
            "/languages/available", self.identity, result_type=LanguageListResult
        )
        return res.languages

    async def list_contributors(self) -> list[Contributor]:
        """List the contributors of every project the token has access to."""
        res: ContributorListResult = await self.dispatcher.dispatch(
            "/contributors/list", self.identity, result_type=ContributorListResult
        )
        return res.contributors
