"""Models for projects, languages and contributors as returned by the service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from dataclasses_json import DataClassJsonMixin, dataclass_json

from poeditor.utils.field_utils import NullDefaultsMixin, flag_field, text_tuple_field, timestamp_field

__all__: list[str] = [
    "Contributor",
    "ContributorPermission",
    "ContributorProject",
    "LanguageDetails",
    "ProjectDetails",
]


@dataclass_json
@dataclass(frozen=True)
class ProjectDetails(NullDefaultsMixin, DataClassJsonMixin):
    """Project metadata.

    ``projects/list`` only returns id, name, public, open and created; the remaining
    fields keep their defaults in that case.

    Attributes:
        id (int): Project identifier.
        name (str): Project name.
        description (str): Project description.
        public (bool): Whether the project is public.
        open (bool): Whether anyone may join as a contributor.
        reference_language (str): Code of the reference language, empty if unset.
        terms (int): Number of terms.
        created (datetime): Creation time.
    """

    id: int
    name: str = ""
    description: str = ""
    public: bool = flag_field()
    open: bool = flag_field()
    reference_language: str = ""
    terms: int = 0
    created: datetime = timestamp_field()


@dataclass_json
@dataclass(frozen=True)
class LanguageDetails(NullDefaultsMixin, DataClassJsonMixin):
    """Language metadata; ``languages/available`` only fills name and code."""

    name: str = ""
    code: str = ""
    translations: int = 0
    percentage: float = 0.0
    updated: datetime = timestamp_field()


@dataclass_json
@dataclass(frozen=True)
class ContributorProject(NullDefaultsMixin, DataClassJsonMixin):
    id: int = 0
    name: str = ""


@dataclass_json
@dataclass(frozen=True)
class ContributorPermission(NullDefaultsMixin, DataClassJsonMixin):
    """A contributor's access to one project.

    Attributes:
        project (ContributorProject): The project the permission applies to.
        type (str): ``"administrator"`` or ``"contributor"``.
        proofreader (bool): Whether the contributor may proofread.
        languages (tuple[str, ...]): Language codes a contributor is assigned to.
    """

    project: ContributorProject = field(default_factory=ContributorProject)
    type: str = ""
    proofreader: bool = flag_field()
    languages: tuple[str, ...] = text_tuple_field()


@dataclass_json
@dataclass(frozen=True)
class Contributor(NullDefaultsMixin, DataClassJsonMixin):
    name: str = ""
    email: str = ""
    permissions: list[ContributorPermission] = field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return any(permission.type == "administrator" for permission in self.permissions)
