import logging

from framing.config import default_size_budget


def test_default_budget(monkeypatch):
    monkeypatch.delenv("FRAMING_MAX_DIMENSION", raising=False)
    monkeypatch.delenv("FRAMING_MAX_PIXELS", raising=False)
    budget = default_size_budget()
    assert budget.max_dimension == 8192
    assert budget.max_pixel_area == 50_000_000


def test_budget_from_environment(monkeypatch):
    monkeypatch.setenv("FRAMING_MAX_DIMENSION", "4000")
    monkeypatch.setenv("FRAMING_MAX_PIXELS", "1e6")
    budget = default_size_budget()
    assert budget.max_dimension == 4000.0
    assert budget.max_pixel_area == 1_000_000.0


def test_malformed_environment_keeps_defaults(monkeypatch, caplog):
    monkeypatch.setenv("FRAMING_MAX_DIMENSION", "huge")
    monkeypatch.setenv("FRAMING_MAX_PIXELS", "-5")
    with caplog.at_level(logging.WARNING, logger="framing.config"):
        budget = default_size_budget()
    assert budget.max_dimension == 8192
    assert budget.max_pixel_area == 50_000_000
    assert "FRAMING_MAX_DIMENSION" in caplog.text
    assert "FRAMING_MAX_PIXELS" in caplog.text
