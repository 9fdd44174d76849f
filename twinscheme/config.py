from __future__ import annotations
import os

EVALUATORS = ("cps", "ast_walk")

_DEFAULT_EVALUATOR = "cps"
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_default_evaluator() -> str:
    name = value_from_env("TWINSCHEME_EVALUATOR", _DEFAULT_EVALUATOR).lower()
    if name not in EVALUATORS:
        raise ValueError(f"TWINSCHEME_EVALUATOR must be one of {EVALUATORS}, got {name!r}")
    return name


def get_log_level() -> str:
    return value_from_env("TWINSCHEME_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


def get_history_file() -> str:
    return os.path.expanduser(value_from_env("TWINSCHEME_HISTORY", "~/.twinscheme_history"))
