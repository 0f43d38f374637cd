from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RealIPConfig(BaseModel):
    """Real-IP resolution settings.

    Keys are accepted in snake_case or camelCase (``excludedNetworks``).
    Only types are checked here; CIDR syntax and provider names are
    validated when the resolver is built.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    excluded_networks: list[str] = Field(
        default_factory=list,
        description="CIDR blocks whose addresses are never trusted",
    )
    excluded_addresses: list[str] = Field(
        default_factory=list,
        description="Single addresses that are never trusted (invalid ones are skipped)",
    )
    providers: list[str] = Field(
        default_factory=list,
        description="Providers to enable; empty enables all. 'generic' is always on",
    )
    preferred_provider: str = Field(
        default="",
        description="Provider whose address wins when it has one; empty for none",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Root log level")
    json_output: bool = Field(
        default=False, description="Emit JSON lines instead of coloured text"
    )


class ServerConfig(BaseModel):
    """Uvicorn bind settings for ``python -m realip``."""

    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=8000, description="API server port")


def create_config() -> RealIPConfig:
    """Return the default configuration: no exclusions, every provider."""
    return RealIPConfig()
