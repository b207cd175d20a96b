# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    PAYLOADGUARD_STRICT: bool = Field(
        default=True,
        description="Default strictness of validators built with validatable()",
    )
    PAYLOADGUARD_LOG_PREFIX: str = Field(
        default="[Parsing]",
        description="Prefix of the warnings emitted by parse()",
    )
    PAYLOADGUARD_MAX_REPORTED_ERRORS: int | None = Field(
        default=None,
        ge=1,
        description="Cap on issues kept per failed validation, None keeps all",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = AppSettings()
# Store the instance in the class variable for singleton pattern
AppSettings._instance = settings
