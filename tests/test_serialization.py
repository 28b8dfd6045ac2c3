import json

from framing.geometry import layout
from framing.models import CompositionParams, ImageExtent, SizeBudget
from framing.params import EditSettings
from framing.serialization import edit_comment, layout_to_dict, settings_from_dict, settings_to_dict


def test_layout_to_dict_is_json_ready():
    params = CompositionParams.from_ratio_string("1:1", matte_thickness=20, frame_thickness=10)
    result = layout(ImageExtent(800, 400), params, SizeBudget.unlimited())
    data = json.loads(json.dumps(layout_to_dict(result)))
    assert data["canvas"] == {"width": 860.0, "height": 860.0}
    assert data["image"]["box"] == [30.0, 230.0, 830.0, 630.0]
    assert data["matte"]["thickness"] == 20.0
    assert data["frame_thickness"] == 10.0
    assert data["scale"] == 1.0


def test_settings_dict_restores_editor_state():
    settings = EditSettings(matte_width=12.5, frame_width=30, frame_ratio="9:16", frame_enabled=False, scale=1.4, rotation_degrees=-90)
    assert settings_from_dict(settings_to_dict(settings)) == settings


def test_settings_from_partial_dict_uses_defaults():
    settings = settings_from_dict({"matte_width": 4, "frame_ratio": ""})
    assert settings.matte_width == 4.0
    assert settings.frame_ratio == "1:1"
    assert settings.frame_enabled is True
    assert settings.scale == 1.0


def test_edit_comment():
    settings = EditSettings(matte_width=12.5, frame_width=30, frame_ratio="3:4")
    assert edit_comment(settings) == "Edited with Framing - Matte:12.5px Frame:30px Ratio:3:4"


def test_settings_from_dict_treats_null_as_missing():
    settings = settings_from_dict(
        {"matte_width": None, "frame_width": None, "frame_ratio": None, "frame_enabled": None, "scale": None, "rotation_degrees": None}
    )
    assert settings == EditSettings()


def test_settings_from_dict_ignores_malformed_values():
    settings = settings_from_dict({"matte_width": "thick", "frame_width": "12", "scale": float("nan"), "frame_ratio": 3})
    assert settings.matte_width == 0.0
    assert settings.frame_width == 12.0
    assert settings.scale == 1.0
    assert settings.frame_ratio == "1:1"


def test_settings_from_dict_requires_real_bool_flag():
    assert settings_from_dict({"frame_enabled": "false"}).frame_enabled is True
    assert settings_from_dict({"frame_enabled": 0}).frame_enabled is True
    assert settings_from_dict({"frame_enabled": False}).frame_enabled is False
