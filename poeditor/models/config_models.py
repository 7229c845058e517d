"""Configuration data models for the POEditor client.

Each dataclass mirrors one section of the INI configuration file; attribute names match the
INI keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

__all__: list[str] = ["DEFAULT_BASE_URL", "Config", "General", "Logging", "POEditorSection"]

DEFAULT_BASE_URL: Final[str] = "https://api.poeditor.com/v2"


@dataclass
class General:
    DEBUG: bool = False


@dataclass
class POEditorSection:
    API_TOKEN: str = ""
    BASE_URL: str = DEFAULT_BASE_URL
    TIMEOUT: float = 0.0  # seconds; 0 disables the transport timeout


@dataclass
class Logging:
    LEVEL: str = "INFO"
    FILE: str = ""


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    POEDITOR: POEditorSection = field(default_factory=POEditorSection)
    LOGGING: Logging = field(default_factory=Logging)

    def __repr__(self) -> str:
        # keep the token out of logs and tracebacks
        masked: str = "***" if self.POEDITOR.API_TOKEN else ""
        return (
            f"Config(GENERAL={self.GENERAL!r}, POEDITOR=POEditorSection(API_TOKEN={masked!r}, "
            f"BASE_URL={self.POEDITOR.BASE_URL!r}, TIMEOUT={self.POEDITOR.TIMEOUT!r}), LOGGING={self.LOGGING!r})"
        )
