"""Pydantic models for sqlbatch configuration."""

from enum import Enum
from typing import List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_URL_ENV = "GO_SQL_DATABASE_URL"
LOG_LEVEL_ENV = "GO_SQL_LOG_LEVEL"
DEFAULT_CONFIG_NAME = "default"


class DriverType(str, Enum):
    """Drivers a config entry may name."""
    POSTGRES = "postgres"
    MYSQL = "mysql"


class ConnectionSpec(BaseModel):
    """One named entry of the ``dsn`` list."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    driver: DriverType
    user: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    db_name: str = ""
    ssl_mode: str = ""

    @field_validator("port", mode="before")
    @classmethod
    def coerce_port(cls, v):
        """Accept numeric ports as well as strings."""
        if isinstance(v, bool):
            raise ValueError("port must be a string or an integer")
        if isinstance(v, int):
            return str(v)
        return v

    def to_url(self) -> str:
        """Synthesize the connection URL for this entry."""
        return (
            f"{self.driver.value}://{self.user}:{self.password}@"
            f"{self.host}:{self.port}/{self.db_name}?sslmode={self.ssl_mode}"
        )


class ConfigDocument(BaseModel):
    """The JSON configuration file."""

    model_config = ConfigDict(extra="ignore")

    dsn: List[ConnectionSpec] = Field(default_factory=list)

    def select(self, name: str) -> Optional[ConnectionSpec]:
        """Return the first entry called ``name``, or None."""
        for spec in self.dsn:
            if spec.name == name:
                return spec
        return None

    @property
    def names(self) -> List[str]:
        return [spec.name for spec in self.dsn]


class RunOptions(BaseModel):
    """Inputs of one invocation, as parsed from the command line."""

    model_config = ConfigDict(frozen=True)

    target: str = ""
    database_url: str = ""
    config_path: Optional[str] = None
    config_name: str = DEFAULT_CONFIG_NAME
    verbose: bool = False

    @field_validator("target", "database_url", "config_name", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class EnvironmentSettings(BaseSettings):
    """Environment-specific settings."""

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    database_url: str = Field(default="", validation_alias=AliasChoices(DATABASE_URL_ENV))
    log_level: str = Field(default="WARNING", validation_alias=AliasChoices(LOG_LEVEL_ENV))
