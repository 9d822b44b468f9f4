# protokit/conf/models.py
from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from protokit.exceptions import ConfigurationError


class ProtokitConfig(BaseModel):
    """
    Validated view of the layered :class:`~protokit.conf.settings.Settings`.

    Keys are the upper-case settings names lowered to attribute form, so
    ``AUTO_CURRY`` becomes ``auto_curry``. Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    auto_curry: bool = True
    dispatch_cache: bool = True
    log_registrations: bool = True
    freeze_on_finalize: bool = True
    trace_registration: bool = True
    trace_level: Literal["debug", "info", "minimal"] = "info"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ProtokitConfig:
        data = {str(k).lower(): v for k, v in settings.items()}
        if isinstance(data.get("trace_level"), str):
            data["trace_level"] = data["trace_level"].strip().lower()
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise ConfigurationError(f"Invalid protokit settings: {err}") from err
