"""Shared fixtures: a recording I2C bus and delay."""

import pytest

from funduino_railway import debug as debug_module
from funduino_railway.hardware.pca9685 import PCA9685
from funduino_railway.railway import FunduinoRailway


class FakeBus:
    """Stands in for smbus2.SMBus, logging writes alongside sleeps."""

    def __init__(self, log):
        self.log = log

    def write_byte_data(self, address, register, value):
        self.log.append(("write", address, register, value))


@pytest.fixture(autouse=True)
def reset_debug():
    debug_module.set_debug(False)
    yield
    debug_module.set_debug(False)


@pytest.fixture
def log():
    return []


@pytest.fixture
def pwm(log):
    return PCA9685(bus=FakeBus(log), sleep=lambda s: log.append(("sleep", s)))


@pytest.fixture
def railway(pwm):
    return FunduinoRailway(pwm)


def writes(log):
    """(register, value) pairs from a log, sleeps dropped."""
    return [(entry[2], entry[3]) for entry in log if entry[0] == "write"]


def channel_pulse(log, channel):
    """Decode the last on/off pair written to a channel."""
    base = 0x06 + 4 * channel
    regs = {}
    for register, value in writes(log):
        regs[register] = value
    on = regs[base] | (regs[base + 1] << 8)
    off = regs[base + 2] | (regs[base + 3] << 8)
    return on, off
