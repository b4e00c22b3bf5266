import pytest

from layoututils.enumstr import EnumStr, enumstr


LightSwitch = enumstr("LightSwitch", {"On": "ON", "Off": "OFF"})


def test_enumstr_to_str():
    assert LightSwitch.On.to_str() == "ON"
    assert LightSwitch.Off.to_str() == "OFF"


def test_enumstr_from_str():
    assert LightSwitch.from_str("ON") is LightSwitch.On
    assert LightSwitch.from_str("OFF") is LightSwitch.Off
    assert LightSwitch.from_str("NEITHER") is None


def test_from_str_is_case_sensitive():
    assert LightSwitch.from_str("on") is None


def test_display():
    assert str(LightSwitch.On) == "ON"
    assert f"{LightSwitch.Off}" == "OFF"


def test_pairs_as_tuples():
    Dir = enumstr("Dir", [("Horiz", "HORIZONTAL"), ("Vert", "VERTICAL")])
    assert [m.name for m in Dir] == ["Horiz", "Vert"]
    assert Dir.from_str("VERTICAL") is Dir.Vert
    assert issubclass(Dir, EnumStr)


def test_round_trip():
    for member in LightSwitch:
        assert LightSwitch.from_str(member.to_str()) is member


def test_class_subclass():
    class Side(EnumStr):
        LEFT = "left"
        RIGHT = "right"

    assert Side.from_str("right") is Side.RIGHT
    assert EnumStr.to_str(Side.LEFT) == "left"
    assert EnumStr.__str__(Side.RIGHT) == "right"


def test_non_string_value_rejected():
    with pytest.raises(TypeError):
        enumstr("Bad", {"One": 1})