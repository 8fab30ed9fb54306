"""
Shield Icon — descriptor of a shield-style identicon

Treatment — размеченное объединение (поле "type"):
- SingleColor: сплошное поле без узора
- TwoColor: второй цвет, наложенный под углом
- Stripes: полосы второго цвета под углом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Угол кратен 45 и лежит в [0, 360)
2. pattern_color хорошо контрастирует с field_color
3. Stripes: stride > 0, все stripe_xs в (0, 1)
4. Дескриптор неизменяем (frozen=True) и не ссылается на пул/палитру
"""

from typing import Annotated, Final, Literal, Tuple, Union

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator

from src.core.domain.color import Color

# Допустимые углы узора: 0, 45, ..., 315
ANGLE_CHOICES: Final[Tuple[int, ...]] = tuple(range(0, 360, 45))


def _validate_angle(v: int) -> int:
    if v not in ANGLE_CHOICES:
        raise ValueError(f"angle {v} must be one of {ANGLE_CHOICES}")
    return v


def _validate_emoji(v: str) -> str:
    if len(v) != 1:
        raise ValueError(f"emoji must be a single code point, got {v!r}")
    return v


Angle = Annotated[int, AfterValidator(_validate_angle)]
Emoji = Annotated[str, AfterValidator(_validate_emoji)]


# =============================================================================
# TREATMENTS
# =============================================================================


class SingleColor(BaseModel):
    """Сплошной цвет щита, без узора."""

    type: Literal["SingleColor"] = "SingleColor"

    model_config = {"frozen": True}


class TwoColor(BaseModel):
    """Двухцветный щит: pattern_color наложен под углом angle."""

    type: Literal["TwoColor"] = "TwoColor"
    pattern_color: Color
    angle: Angle = Field(..., description="Угол узора в градусах")

    model_config = {"frozen": True}


class Stripes(BaseModel):
    """Полосатый щит."""

    type: Literal["Stripes"] = "Stripes"
    pattern_color: Color
    stride: float = Field(..., gt=0, lt=1, description="Ширина полосы и промежутка")
    stripe_xs: Tuple[float, ...] = Field(..., min_length=1, description="X-координаты полос")
    angle: Angle = Field(..., description="Угол полос в градусах")

    model_config = {"frozen": True}

    @field_validator("stripe_xs")
    @classmethod
    def validate_stripe_xs(cls, v: Tuple[float, ...]) -> Tuple[float, ...]:
        for x in v:
            if not 0.0 < x < 1.0:
                raise ValueError(f"stripe x {x} must be in (0, 1)")
        return v


ShieldTreatment = Annotated[
    Union[SingleColor, TwoColor, Stripes],
    Field(discriminator="type"),
]


# =============================================================================
# SHIELD ICON
# =============================================================================


class ShieldIconData(BaseModel):
    """
    Описание иконки-щита.

    Порядок полей фиксирован — он же порядок полей в JSON.
    """

    treatment: ShieldTreatment
    field_color: Color
    emoji: Emoji

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_pattern_contrast(self) -> "ShieldIconData":
        """Узор должен быть различим на фоне поля."""
        pattern_color = getattr(self.treatment, "pattern_color", None)
        if pattern_color is not None and not self.field_color.contrasts_well(pattern_color):
            raise ValueError(
                f"pattern_color {pattern_color.css_color()} does not contrast with "
                f"field_color {self.field_color.css_color()}"
            )
        return self
