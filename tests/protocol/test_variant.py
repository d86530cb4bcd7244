import enum
import pytest
import sdkwire

from sdkwire.protocol import variant


@variant.register
class Color(variant.Enumerated):
    RED = 'Red'
    GREEN = 'Green'
    BY_HEX = 'ByHex'


class Unregistered(variant.Enumerated):
    ONE = 'One'


def test_round_trip():

    for member in Color:
        wire = member.to_wire()
        assert isinstance(wire, str)
        assert Color.from_wire(wire) is member
        assert variant.from_wire(Color, variant.to_wire(member)) is member


def test_str():

    assert str(Color.BY_HEX) == 'ByHex'


def test_exact_match():

    assert Color.from_wire('Red') is Color.RED

    for bad in ('red', 'RED', 'Red ', ' Red', 'Re', 'RED'.lower(), 'totally-unknown-token'):
        with pytest.raises(sdkwire.UnknownVariantError):
            Color.from_wire(bad)


def test_empty():

    for bad in (None, ''):
        with pytest.raises(sdkwire.UnknownVariantError) as raised:
            Color.from_wire(bad)

        assert raised.value.enumerated is Color
        assert raised.value.value == bad
        assert 'None or empty' in str(raised.value)


def test_wrong_types():

    for bad in (1, True, ['Red'], {'Red': 1}):
        with pytest.raises(sdkwire.UnknownVariantError):
            Color.from_wire(bad)


def test_unknown_variant_is_value_error():

    with pytest.raises(ValueError):
        Color.from_wire('Blue')


def test_unregistered():

    assert variant.registered(Color)
    assert not variant.registered(Unregistered)

    with pytest.raises(sdkwire.ConfigurationError):
        Unregistered.from_wire('One')


def test_wire_values():

    assert variant.wire_values(Color) == ('Red', 'Green', 'ByHex')


def test_bad_registrations():

    with pytest.raises(sdkwire.ConfigurationError):
        @variant.register
        class Duplicated(variant.Enumerated):
            ONE = 'One'
            UNO = 'One'

    with pytest.raises(sdkwire.ConfigurationError):
        @variant.register
        class Empty(variant.Enumerated):
            NOTHING = ''

    with pytest.raises(sdkwire.ConfigurationError):
        @variant.register
        class Numeric(variant.Enumerated):
            ONE = 1

    class Plain(enum.Enum):
        ONE = 'One'

    with pytest.raises(sdkwire.ConfigurationError):
        variant.register(Plain)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
