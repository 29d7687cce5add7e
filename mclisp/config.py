from __future__ import annotations
import os
from dataclasses import dataclass


# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_STRICT_ARITY = True
_DEFAULT_EXTENDED_SYNTAX = False

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{var} must be a boolean flag, got {raw!r}")


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    return int_from_env("MCLISP_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT)


def get_strict_arity() -> bool:
    return flag_from_env("MCLISP_STRICT_ARITY", _DEFAULT_STRICT_ARITY)


def get_extended_syntax() -> bool:
    return flag_from_env("MCLISP_EXTENDED_SYNTAX", _DEFAULT_EXTENDED_SYNTAX)


@dataclass(frozen=True)
class Settings:
    """Interpreter settings, resolved once from the environment."""

    recursion_limit: int = _DEFAULT_RECURSION_LIMIT
    strict_arity: bool = _DEFAULT_STRICT_ARITY
    extended_syntax: bool = _DEFAULT_EXTENDED_SYNTAX

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            recursion_limit=get_recursion_limit(),
            strict_arity=get_strict_arity(),
            extended_syntax=get_extended_syntax(),
        )
