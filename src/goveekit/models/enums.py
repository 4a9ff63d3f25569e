from enum import Enum


class CommandKind(str, Enum):
    TURN = "turn"
    BRIGHTNESS = "brightness"
    COLOR = "color"
    COLOR_TEM = "colorTem"

    def __str__(self) -> str:
        return self.value


class PowerState(str, Enum):
    ON = "on"
    OFF = "off"

    @classmethod
    def from_bool(cls, is_on: bool) -> "PowerState":
        return cls.ON if is_on else cls.OFF

    def __str__(self) -> str:
        return self.value
