"""Documentation settings.

Mirrors the options a host application passes when mounting the docs:
app-level info lookups plus `defaultResponses`, `swagger` and `basicAuth`.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_MOUNT_PATH = "__swagger__"

DEFAULT_RESPONSES = {"default": {"description": "Default responses"}}


class BasicAuth(BaseModel):
    """Credential pair guarding the documentation endpoints."""

    name: str = ""
    password: str = Field(default="", alias="pass")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def enabled(self) -> bool:
        # An incomplete pair leaves the docs open
        return bool(self.name and self.password)


class DocConfig(BaseModel):
    """Everything the synthesizer and doc server read besides the routes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    description: str = ""
    version: str = "1.0.0"
    supported_types: list[str] = ["application/json"]
    default_responses: dict[str, dict] = DEFAULT_RESPONSES
    swagger: dict = {}
    basic_auth: BasicAuth | None = None
    mount_path: str = DEFAULT_MOUNT_PATH
    app_path: str = "/"

    @field_validator("default_responses", mode="before")
    @classmethod
    def _describe_responses(cls, value):
        if not isinstance(value, dict):
            return value
        return {
            str(code): {"description": resp} if isinstance(resp, str) else resp
            for code, resp in value.items()
        }


def load_config(file_path: Path | None) -> DocConfig:
    """Load a DocConfig from a YAML file. No file means defaults."""
    if file_path is None:
        return DocConfig()
    data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    return DocConfig.model_validate(data)
