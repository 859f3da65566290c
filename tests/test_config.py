# tests/test_config.py
from importlib import reload

import edify.core.config as cfg_mod


def test_defaults_present(monkeypatch):
    # wire-level defaults match what the vendors are sent
    for name in ("MAX_TOKENS", "TEMPERATURE", "GROUNDING_CHARS", "SOURCE_CHARS"):
        monkeypatch.delenv(name, raising=False)
    reload(cfg_mod)
    assert cfg_mod.MAX_TOKENS == 1000
    assert cfg_mod.TEMPERATURE == 0.7
    assert cfg_mod.GROUNDING_CHARS == 1000
    assert cfg_mod.SOURCE_CHARS == 3000
    assert cfg_mod.FLASHCARD_COUNT > 0
    assert cfg_mod.QUIZ_COUNT > 0


def test_env_override(monkeypatch):
    monkeypatch.setenv("EDIFY_PROVIDER", "google")
    monkeypatch.setenv("TEMPERATURE", "0.2")
    reload(cfg_mod)
    assert cfg_mod.DEFAULT_PROVIDER == "google"
    assert cfg_mod.TEMPERATURE == 0.2
    monkeypatch.undo()
    reload(cfg_mod)
