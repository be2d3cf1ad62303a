#=========== regu_ai/config/params.py

from dataclasses import dataclass, field
from typing import Optional, Mapping
import os

from dotenv import load_dotenv


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_ACTOR = "Current User"


@dataclass(frozen=True)
class SummaryClientParams:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE


@dataclass(frozen=True)
class AppParams:
    # 要約クライアント
    summary: SummaryClientParams = field(default_factory=SummaryClientParams)

    # 仕訳の起票者
    actor: str = DEFAULT_ACTOR

    # ログ
    log_level: str = "INFO"


def load_params(env: Optional[Mapping[str, str]] = None) -> AppParams:
    """
    Build AppParams from the environment.

    A ``.env`` file in the working directory is loaded first when reading the
    real process environment. The API key is passed through untouched; a
    missing or wrong key only shows up when the summary request fails.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    raw_temperature = env.get("REGU_AI_TEMPERATURE", "")
    try:
        temperature = float(raw_temperature) if raw_temperature else DEFAULT_TEMPERATURE
    except ValueError:
        raise ValueError(f"REGU_AI_TEMPERATURE must be a number, got {raw_temperature!r}")

    summary = SummaryClientParams(
        api_key=env.get("API_KEY") or env.get("GEMINI_API_KEY"),
        base_url=env.get("REGU_AI_BASE_URL") or DEFAULT_BASE_URL,
        model=env.get("REGU_AI_MODEL") or DEFAULT_MODEL,
        temperature=temperature,
    )

    return AppParams(
        summary=summary,
        actor=env.get("REGU_AI_ACTOR") or DEFAULT_ACTOR,
        log_level=(env.get("REGU_AI_LOG_LEVEL") or "INFO").upper(),
    )

#=========== end params.py
