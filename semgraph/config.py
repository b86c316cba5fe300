"""Configuration for semgraph using Pydantic Settings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``SEMGRAPH_``)."""

    model_config = SettingsConfigDict(
        env_prefix="SEMGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Segment markers: <!-- {marker_namespace} start key="..." -->
    marker_namespace: str = Field(
        default="semcontext:segment",
        description="Namespace token used inside segment start/end markers",
    )
    frontmatter_namespace: str = Field(
        default="semcontext",
        description="Frontmatter key holding segment specs and page semantics",
    )

    # Validation
    validation_mode: str = Field(
        default="strict",
        description="Default segment validation mode: 'strict' or 'loose'",
    )

    # Aggregation
    checksum_prefix: str = Field(
        default="sha256",
        description="Algorithm label prepended to combined checksums",
    )

    # Token counting (tiktoken encoding name)
    token_encoding: str = Field(default="cl100k_base", description="tiktoken encoding")

    log_level: str = Field(default="INFO", description="Log level for configure_logging()")


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for command-line use of the package."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
