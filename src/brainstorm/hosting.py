"""Hosting environment.

Describes where the application lives on disk and which environment it runs
in. The app factory reads templates from ``templates_path``; tests hand in
their own instance to point an app at a specific content root.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .config import Settings

PACKAGE_ROOT = Path(__file__).resolve().parent

DEVELOPMENT = "development"


class ApplicationEnvironment(BaseModel):
    """Where the application's content lives and which environment it runs in.

    Attributes:
        application_name: Display name, used for logging
        application_base_path: Content root; must contain ``templates/``
        environment_name: ``development``, ``staging``, ``production``, ...
    """

    application_name: str
    application_base_path: Path
    environment_name: str = DEVELOPMENT

    model_config = ConfigDict(frozen=True)

    @property
    def is_development(self) -> bool:
        return self.environment_name.lower() == DEVELOPMENT

    @property
    def templates_path(self) -> Path:
        return self.application_base_path / "templates"

    @classmethod
    def from_settings(cls, settings: Settings) -> ApplicationEnvironment:
        base_path = Path(settings.content_root) if settings.content_root else PACKAGE_ROOT
        return cls(
            application_name=settings.app_name,
            application_base_path=base_path.resolve(),
            environment_name=settings.environment,
        )


__all__ = ["DEVELOPMENT", "PACKAGE_ROOT", "ApplicationEnvironment"]
