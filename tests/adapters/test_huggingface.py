import pytest

from diarization_report.adapters.huggingface import HF_TOKEN_ENV, ensure_hf_token
from diarization_report.errors import InitializationError


def test_ensure_hf_token_missing(monkeypatch):
    monkeypatch.delenv(HF_TOKEN_ENV, raising=False)

    with pytest.raises(InitializationError) as exc_info:
        ensure_hf_token()

    assert "[HF] Missing HUGGINGFACE_TOKEN" in str(exc_info.value)
    assert "export HUGGINGFACE_TOKEN=hf_xxx" in str(exc_info.value)


def test_ensure_hf_token_present(monkeypatch):
    token = "hf_dummy_token"
    monkeypatch.setenv(HF_TOKEN_ENV, token)

    assert ensure_hf_token() == token


def test_ensure_hf_token_custom_variable(monkeypatch):
    monkeypatch.setenv("MY_HF", "hf_other")

    assert ensure_hf_token("MY_HF") == "hf_other"
