import pytest

from hopstep.logger import LogType
from hopstep.names import Name
from hopstep.output_device import OutputDevice, StringOutputDevice


def test_starts_with_name():
    assert StringOutputDevice("abc").value == "abc"
    assert StringOutputDevice().value == ""


def test_serialize_appends():
    device = StringOutputDevice("abc")
    device.serialize("def", LogType.INFO, Name("Category"))
    device.serialize("!", LogType.WARN, Name())
    assert device.value == "abcdef!"


def test_iadd_appends_and_keeps_device():
    device = StringOutputDevice()
    original = device
    device += "hello"
    device += " world"
    assert device is original
    assert str(device) == "hello world"


def test_output_device_is_abstract():
    with pytest.raises(TypeError):
        OutputDevice()