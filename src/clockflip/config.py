from __future__ import annotations

import os

FROM_CHOICES = ("auto", "12", "24")
DEFAULT_FROM = "auto"

ENV_FROM = "CLOCKFLIP_FROM"
ENV_DEBUG = "CLOCKFLIP_DEBUG"

_TRUTHY = ("1", "true", "yes", "on")


def resolve_from_format(from_arg: str | None) -> tuple[str, str]:
    """
    Effective input format for the cli, and where it came from.
    Precedence: --from, then CLOCKFLIP_FROM, then "auto".
    """
    if from_arg:
        return from_arg, "argument"
    env = os.environ.get(ENV_FROM, "").strip().lower()
    if env:
        if env not in FROM_CHOICES:
            raise SystemExit(
                f"{ENV_FROM} must be one of {', '.join(FROM_CHOICES)} (got {env!r})"
            )
        return env, "environment"
    return DEFAULT_FROM, "default"


def debug_enabled(debug_arg: bool) -> bool:
    if debug_arg:
        return True
    return os.environ.get(ENV_DEBUG, "").strip().lower() in _TRUTHY
