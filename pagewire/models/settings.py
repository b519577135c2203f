"""Wiring configuration."""

from __future__ import annotations
import os
from typing import Mapping

from pydantic import BaseModel

_TRUTHY = {"1", "true", "yes", "on"}


class WiringConfig(BaseModel):
    """Controls diagnostics and what page assembly is allowed to inject."""
    diagnostics: bool = False                # Warn on unregistered action execution
    auto_inject: bool = True                 # Synthesise bindings for missing providers
    inject_decorator_overlays: bool = True   # Inject decorator/section-implied features

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WiringConfig:
        """Build a config from PAGEWIRE_* environment variables."""
        env = os.environ if environ is None else environ
        diagnostics = (
            env.get("PAGEWIRE_ENV", "").lower() == "development"
            or env.get("PAGEWIRE_DIAGNOSTICS", "").lower() in _TRUTHY
        )
        return cls(diagnostics=diagnostics)
