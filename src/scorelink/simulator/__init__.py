"""scorelink Hardware Simulator"""

from .fake_serial import FakeSerial, GameSimulator

__all__ = ["FakeSerial", "GameSimulator"]
