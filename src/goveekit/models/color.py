import re
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError as PydanticValidationError,
    model_validator,
)

from ..errors import ValidationError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Color(BaseModel):
    """An RGB color as the Govee API sends and expects it: ``{"r": .., "g": .., "b": ..}``.

    Besides the object form, a hex string (``"#0AFF06"``, ``"0aff06"``, ``"#0F6"``)
    or an ``(r, g, b)`` sequence is accepted wherever a Color is validated.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(0, ge=0, le=255, strict=True)
    g: int = Field(0, ge=0, le=255, strict=True)
    b: int = Field(0, ge=0, le=255, strict=True)

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as err:
            raise ValidationError(f"invalid color {data!r}: {err.errors()[0]['msg']}") from err

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls._split_hex(value)
        if isinstance(value, (tuple, list)):
            if len(value) != 3:
                raise ValueError(f"expected 3 color channels, got {len(value)}")
            r, g, b = value
            return {"r": r, "g": g, "b": b}
        return value

    @staticmethod
    def _split_hex(text: str) -> dict[str, int]:
        match = _HEX_RE.match(text.strip())
        if not match:
            raise ValueError(f"invalid hex color {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            # #RGB -> #RRGGBB
            digits = "".join(c * 2 for c in digits)
        return {
            "r": int(digits[0:2], 16),
            "g": int(digits[2:4], 16),
            "b": int(digits[4:6], 16),
        }

    @classmethod
    def _checked(cls, value: Any) -> "Color":
        try:
            return cls.model_validate(value)
        except PydanticValidationError as err:
            raise ValidationError(f"invalid color {value!r}: {err.errors()[0]['msg']}") from err

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a hex string such as ``#0AFF06``."""
        return cls._checked(text)

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> "Color":
        return cls._checked(rgb)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def __str__(self) -> str:
        return self.to_hex()
