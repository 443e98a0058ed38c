from __future__ import annotations

"""Runtime settings for logging and chain tracing.

Values come from environment variables so tracing can be switched on
without touching code:

* ``TRYCHAIN_LOG_LEVEL`` – ``debug``, ``info``, ``warning`` or ``error``
* ``TRYCHAIN_TRACE`` – ``1``/``true``/``yes`` to log every chain event
* ``TRYCHAIN_TRUNCATE`` – max characters of a value shown in traces
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["TraceConfig", "ENV_PREFIX"]

ENV_PREFIX = "TRYCHAIN_"

_ENV_FIELDS = {
    "LOG_LEVEL": "level",
    "TRACE": "trace",
    "TRUNCATE": "truncate",
}


class TraceConfig(BaseModel):  # noqa: D101 – self-documenting via fields
    level: Literal["debug", "info", "warning", "error"] = "info"
    trace: bool = False
    truncate: int = Field(default=120, ge=0)

    @field_validator("level", mode="before")
    @classmethod
    def _lower_level(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    # -------------------------------------------------- #

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TraceConfig":
        """Build a config from *environ* (defaults to ``os.environ``).

        Unset variables keep their defaults; bad values raise
        ``pydantic.ValidationError``.
        """
        env = os.environ if environ is None else environ
        data = {
            field: env[ENV_PREFIX + key].strip()
            for key, field in _ENV_FIELDS.items()
            if env.get(ENV_PREFIX + key, "").strip()
        }
        return cls.model_validate(data)

    def apply(self) -> None:
        """Configure the trychain logger and tracing from this config."""
        from trychain.utils import logging as tlog

        # tracing is logged at DEBUG so it needs the logger at that level
        tlog.configure("debug" if self.trace else self.level)
        if self.trace:
            tlog.enable_tracing(truncate=self.truncate)
        else:
            tlog.disable_tracing()
