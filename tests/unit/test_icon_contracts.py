"""
Тесты для JSON Schema контрактов дескрипторов

Проверяет:
1. Загрузку и meta-validation схем
2. Сгенерированные дескрипторы соответствуют контрактам
3. Нарушения (лишние поля, диапазоны, неизвестный type) отвергаются
"""

from importlib.resources import files
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.composer import IconStyle, generate_icon
from src.core.contracts import validators as validators_module
from src.core.contracts import (
    SchemaLoader,
    ShapeIconValidator,
    ShieldIconValidator,
    get_schema_loader,
    validate_shape_icon,
    validate_shield_icon,
)


@pytest.fixture
def valid_shield() -> dict:
    return {
        "treatment": {
            "type": "Stripes",
            "pattern_color": {"r": 48, "g": 230, "b": 11},
            "stride": 0.13333333333333333,
            "stripe_xs": [0.43333333333333335],
            "angle": 135,
        },
        "field_color": {"r": 215, "g": 0, "b": 34},
        "emoji": "👾",
    }


@pytest.fixture
def valid_shape() -> dict:
    return {
        "emoji": "🎺",
        "shape": {"type": "Polygon", "sides": 4},
        "fill_color": {"r": 18, "g": 188, "b": 0},
        "border_color": {"r": 128, "g": 0, "b": 215},
        "offset": 0.0,
    }


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_loads_and_caches(self):
        loader = get_schema_loader()
        schema = loader.load_schema("shield_icon")
        assert schema["title"] == "ShieldIconData"
        assert loader.load_schema("shield_icon") is schema

    def test_schemas_ship_inside_package(self):
        """Схемы лежат рядом с модулем и доступны как package resources."""
        assert get_schema_loader().schema_dir == Path(validators_module.__file__).parent / "schema"
        schema_dir = files("src.core.contracts").joinpath("schema")
        for name in ("shield_icon.json", "shape_icon.json"):
            assert schema_dir.joinpath(name).is_file()

    def test_default_loader_independent_of_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert SchemaLoader().load_schema("shape_icon")["title"] == "ShapeIconData"

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            get_schema_loader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# SHIELD CONTRACT TESTS
# =============================================================================


class TestShieldContract:
    """Тесты shield_icon контракта"""

    def test_valid(self, valid_shield):
        validate_shield_icon(valid_shield)

    def test_generated_icons_conform(self):
        validator = ShieldIconValidator()
        for i in range(50):
            icon = generate_icon(f"contract-{i}", IconStyle.SHIELD)
            validator.validate(icon.model_dump(mode="json"))

    def test_single_color(self):
        validate_shield_icon(
            {
                "treatment": {"type": "SingleColor"},
                "field_color": {"r": 0, "g": 0, "b": 0},
                "emoji": "A",
            }
        )

    def test_unknown_treatment(self, valid_shield):
        valid_shield["treatment"]["type"] = "Checkered"
        with pytest.raises(ValidationError):
            validate_shield_icon(valid_shield)

    def test_bad_angle(self, valid_shield):
        valid_shield["treatment"]["angle"] = 30
        assert not ShieldIconValidator().is_valid(valid_shield)

    def test_extra_field(self, valid_shield):
        valid_shield["seed"] = "x"
        with pytest.raises(ValidationError):
            validate_shield_icon(valid_shield)

    def test_channel_out_of_range(self, valid_shield):
        valid_shield["field_color"]["r"] = 300
        errors = list(ShieldIconValidator().iter_errors(valid_shield))
        assert len(errors) == 1


# =============================================================================
# SHAPE CONTRACT TESTS
# =============================================================================


class TestShapeContract:
    """Тесты shape_icon контракта"""

    def test_valid(self, valid_shape):
        validate_shape_icon(valid_shape)

    def test_generated_icons_conform(self):
        validator = ShapeIconValidator()
        for i in range(50):
            icon = generate_icon(f"contract-{i}", IconStyle.SHAPE)
            validator.validate(icon.model_dump(mode="json"))

    def test_circle(self, valid_shape):
        valid_shape["shape"] = {"type": "Circle"}
        validate_shape_icon(valid_shape)

    def test_polygon_too_few_sides(self, valid_shape):
        valid_shape["shape"]["sides"] = 2
        with pytest.raises(ValidationError):
            validate_shape_icon(valid_shape)

    def test_offset_out_of_range(self, valid_shape):
        valid_shape["offset"] = 1.5
        assert not ShapeIconValidator().is_valid(valid_shape)

    def test_shape_encoding_documented(self):
        """Описание поля shape фиксирует внутренне тегированную форму."""
        schema = get_schema_loader().load_schema("shape_icon")
        description = schema["properties"]["shape"]["description"]
        assert '{"type": "Polygon", "sides": n}' in description
        assert '{"Polygon": n}' in description

    def test_missing_field(self, valid_shape):
        del valid_shape["border_color"]
        with pytest.raises(ValidationError):
            validate_shape_icon(valid_shape)
