from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from auditlog.jsonx.names import is_valid_name
from auditlog.jsonx.types import JSONxConfig

_DEFAULT_JSONX = JSONxConfig()


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or console

    # JSONx vocabulary
    jsonx_namespace: str = _DEFAULT_JSONX.namespace
    jsonx_prefix: str = _DEFAULT_JSONX.namespace_prefix
    jsonx_root_tag: str = _DEFAULT_JSONX.root_tag
    jsonx_value_tag: str = _DEFAULT_JSONX.value_tag

    # JSONx serialization
    jsonx_pretty_print: bool = False
    jsonx_xml_declaration: bool = True

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in {"json", "console"}:
            raise ValueError("log_format must be one of json, console")
        return value

    @field_validator("jsonx_namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("jsonx_namespace must not be empty")
        return value

    @field_validator("jsonx_prefix", "jsonx_root_tag", "jsonx_value_tag")
    @classmethod
    def _check_xml_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError(f"{value!r} is not a valid XML name")
        return value

    def jsonx_config(self) -> JSONxConfig:
        """Build the transcoder configuration from these settings."""
        return JSONxConfig(
            namespace=self.jsonx_namespace,
            namespace_prefix=self.jsonx_prefix,
            root_tag=self.jsonx_root_tag,
            value_tag=self.jsonx_value_tag,
            pretty_print=self.jsonx_pretty_print,
            xml_declaration=self.jsonx_xml_declaration,
        )

    model_config = SettingsConfigDict(
        env_prefix="AUDITLOG_",
        env_file=".env",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
