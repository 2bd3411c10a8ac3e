from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Read NOTESJSON_EXTRA and map it to a pydantic ``extra`` setting.

    The three pydantic names are accepted as is. ``strict`` and the usual
    truthy words reject unknown keys; ``lenient`` and falsy words drop them.
    Anything unrecognised falls back to ``default``.
    """
    raw = (os.getenv("NOTESJSON_EXTRA") or default).strip().lower()

    if raw in ("allow", "forbid", "ignore"):
        return raw
    if raw in ("strict", "1", "true", "yes", "on"):
        return "forbid"
    if raw in ("lenient", "0", "false", "no", "off"):
        return "ignore"
    return default


class WireModel(BaseModel):
    """
    Frozen base for the objects stored in an export file.

    Files written by other tools may add keys such as ``id``. Those are
    dropped on load unless NOTESJSON_EXTRA asks for ``forbid`` or ``allow``.
    """

    model_config = ConfigDict(extra=_env_extra_mode(), frozen=True)


__all__ = ["WireModel", "_env_extra_mode"]
