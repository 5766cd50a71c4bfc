"""Fixed servo wiring and calibration."""

from dataclasses import dataclass, asdict
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, Mapping


class ServoNum(IntEnum):
    """Servo identifiers, valued by the channel each servo is wired to."""
    Servo1 = 0
    Servo2 = 7


@dataclass(frozen=True)
class ServoConfig:
    """Channel and pulse-offset range covering a servo's 0-180 degree sweep."""
    pin_number: int
    min_offset: int
    max_offset: int

    @property
    def spread(self) -> int:
        return self.max_offset - self.min_offset

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SERVOS: Mapping[ServoNum, ServoConfig] = MappingProxyType({
    ServoNum.Servo1: ServoConfig(pin_number=0, min_offset=5, max_offset=25),
    ServoNum.Servo2: ServoConfig(pin_number=7, min_offset=5, max_offset=25),
})
