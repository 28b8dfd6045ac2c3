import json

import pytest

from frame_layout import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("FRAMING_MAX_DIMENSION", raising=False)
    monkeypatch.delenv("FRAMING_MAX_PIXELS", raising=False)


def _run(capsys, *argv):
    assert main(list(argv)) == 0
    return json.loads(capsys.readouterr().out)


def test_export_layout_json(capsys):
    data = _run(capsys, "--width", "800", "--height", "400", "--matte", "20", "--frame", "10")
    assert data["canvas"] == {"width": 860.0, "height": 860.0}
    assert data["scale"] == 1.0


def test_preview_layout_json(capsys):
    data = _run(capsys, "--width", "800", "--height", "400", "--matte", "20", "--frame", "10", "--viewport", "1000x1000")
    assert data["scale"] == pytest.approx(850 / 860)


def test_matte_only(capsys):
    data = _run(capsys, "--width", "800", "--height", "400", "--matte", "20", "--frame", "10", "--no-frame")
    assert data["canvas"] == {"width": 840.0, "height": 440.0}
    assert data["frame_thickness"] == 0.0


def test_fallback_plan(capsys):
    data = _run(capsys, "--width", "8000", "--height", "8000", "--fallback")
    assert data["canvas"]["width"] == pytest.approx(4096)


def test_rejects_bad_viewport():
    with pytest.raises(SystemExit) as exc:
        main(["--width", "800", "--height", "400", "--viewport", "wide"])
    assert exc.value.code == 2


def test_rejects_zero_width():
    with pytest.raises(SystemExit) as exc:
        main(["--width", "0", "--height", "400"])
    assert exc.value.code == 2


def test_viewport_conflicts_with_export_options():
    with pytest.raises(SystemExit) as exc:
        main(["--width", "800", "--height", "400", "--viewport", "800x600", "--fallback"])
    assert exc.value.code == 2


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "inf", "--height", "400"],
        ["--width", "800", "--height", "nan"],
        ["--width", "800", "--height", "400", "--viewport", "infx500"],
        ["--width", "800", "--height", "400", "--matte", "nan"],
        ["--width", "800", "--height", "400", "--max-dimension", "inf"],
    ],
)
def test_rejects_non_finite_numbers(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
