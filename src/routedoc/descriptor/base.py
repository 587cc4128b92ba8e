"""Route and parameter descriptors consumed by the synthesizer.

The host route registry (or a route table file) is converted into
these models before any document is built.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Verb = Literal["get", "post", "put", "delete", "patch", "options", "all", "use"]


class _Descriptor(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RouteGroup(_Descriptor):
    """Grouping entity that owns routes; becomes a tag."""

    name: str = ""
    description: str = ""
    settings: dict = {}


class ParameterDescriptor(_Descriptor):
    """A single route parameter, possibly a structured object."""

    name: str
    type: str | list[str] = "string"  # "string" or ["string"] for array-of
    description: str | None = None
    required: bool = False
    default: Any = None
    enum: list | None = None
    params: list["ParameterDescriptor"] | None = None

    @field_validator("type")
    @classmethod
    def _single_item_type(cls, value):
        if isinstance(value, list) and len(value) != 1:
            raise ValueError("array type must contain exactly one item type")
        return value

    @property
    def is_array(self) -> bool:
        return isinstance(self.type, list)

    @property
    def is_object(self) -> bool:
        return self.params is not None

    @property
    def item_type(self) -> str:
        return self.type[0] if self.is_array else self.type

    @property
    def kind(self) -> str:
        """One of array / object / date / scalar, in that precedence."""
        if self.is_array:
            return "array"
        if self.is_object:
            return "object"
        if self.type == "date":
            return "date"
        return "scalar"


class RouteDescriptor(_Descriptor):
    """One exposed endpoint of the host application."""

    path: str  # /users/:id
    verb: Verb
    name: str
    full_name: str = ""
    description: str = ""
    notes: str = ""
    parent: RouteGroup | None = Field(default=None, exclude=True)
    params: list[ParameterDescriptor] = []
    security: list[dict[str, list[str]]] | None = None

    @field_validator("verb", mode="before")
    @classmethod
    def _lower_verb(cls, value):
        return value.lower() if isinstance(value, str) else value

    def model_post_init(self, __context) -> None:
        if not self.full_name:
            prefix = f"{self.parent.name}." if self.parent and self.parent.name else ""
            self.full_name = f"{prefix}{self.name}"
