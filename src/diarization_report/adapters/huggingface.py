"""Adapters for Hugging Face utilities."""

from __future__ import annotations

import os

from ..errors import InitializationError
from ..util.config import ModelConfig

HF_TOKEN_ENV = ModelConfig().token_env


def ensure_hf_token(env_var: str = HF_TOKEN_ENV) -> str:
    token = os.getenv(env_var)
    if not token:
        raise InitializationError(
            f"[HF] Missing {env_var}. The pyannote pipeline is gated; set it e.g.:\n"
            f"  export {env_var}=hf_xxx\n"
        )
    return token
