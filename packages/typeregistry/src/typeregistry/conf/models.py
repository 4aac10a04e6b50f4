# typeregistry/conf/models.py

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegistrySettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Extension store behavior
    DEDUPE_EXTENSIONS: bool = True

    # Freeze once build_registry() has applied everything below
    FREEZE: bool = False

    # "pkg.module:HostType" -> "pkg.module:SomeGraphType"
    MAPPINGS: dict[str, str] = Field(default_factory=dict)

    # "pkg.module:BaseType" -> ["pkg.module:ExtendingType", ...]
    EXTENSIONS: dict[str, list[str]] = Field(default_factory=dict)

    # Import paths of callables invoked as configure(registry)
    CONFIGURATORS: list[str] = Field(default_factory=list)

    @field_validator("CONFIGURATORS", mode="before")
    @classmethod
    def _split_csv(cls, value):
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value
