# -*- coding: utf-8 -*-
# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Configuration for Cupom Verde

Environment defaults are read with pydantic-settings; the validated result
used by a client is an immutable ClientConfig.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.cupomverde.com.br/api/v2"
DEFAULT_TIMEOUT_MS = 5000
API_KEY_HEADER = "x-api-key"


class CupomVerdeSettings(BaseSettings):
    """Environment defaults (``CPV_API_KEY``, ``CPV_API_URL``)."""

    model_config = SettingsConfigDict(
        env_prefix="CPV_",
        extra="ignore",
        case_sensitive=False,
    )

    api_key: str | None = Field(
        default=None,
        description="API key used when none is passed to init().",
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the Cupom Verde API.",
    )


@dataclass(frozen=True)
class ClientConfig:
    """Validated configuration of one client.

    Attributes:
        api_key: Partner API key (UUID)
        base_url: API base URL, without trailing slash
        request_timeout_ms: Timeout applied to every request
    """
    api_key: str = field(repr=False)
    base_url: str
    request_timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request; a new dict on each access"""
        return {API_KEY_HEADER: self.api_key}

    @property
    def timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000


def load_settings() -> CupomVerdeSettings:
    """Read the environment as it is now."""
    return CupomVerdeSettings()
