import logging
from enum import Enum, auto

import pytest

from sfstruct.core import Record
from sfstruct.fields import StructField, FixedLengthString, BitField
from sfstruct.meta import Endianess


def test_structfield_conversion_raw_value():
    """Check that the attributes "value" and "raw" are the analogous
    of the integers and bytes representation for a field."""
    class Dummy(Record):
        field = StructField('I')

    dummy = Dummy(b'\xfe\xca\x00\x00')

    assert dummy.field.size == 4
    assert dummy.field.raw == b'\xfe\xca\x00\x00'
    assert dummy.field.value == 0xcafe


def test_structfield_signed_and_endianess():
    class Dummy(Record):
        little = StructField('h')
        big = StructField('H', endianess=Endianess.BIG_ENDIAN)

    dummy = Dummy(b'\xfe\xff\x01\x02')

    assert dummy.little.value == -2
    assert dummy.big.value == 0x0102


def test_structfield_not_bound():
    field = StructField('I')

    assert field.size == 4

    with pytest.raises(AttributeError):
        field.value


def test_structfield_enum(caplog):
    class DummyEnum(Enum):
        NONE = 0
        FIRST = auto()
        SECOND = auto()

    class Dummy(Record):
        field = StructField('I', enum=DummyEnum)

    assert Dummy(b'\x02\x00\x00\x00').field.value == DummyEnum.SECOND

    # unknown values are kept as integers
    with caplog.at_level(logging.WARNING):
        assert Dummy(b'\x04\x00\x00\x00').field.value == 4

    assert 'DummyEnum' in caplog.text


def test_fixedlengthstring():
    class Dummy(Record):
        name = FixedLengthString(0x10)

    data = bytes(range(0x10))

    dummy = Dummy(data)

    assert dummy.name.size == 0x10
    assert dummy.name.value == data
    assert dummy.name.raw == data


def test_bitfield():
    class Dummy(Record):
        flags = BitField('B', [('kind', 4), ('enabled', 1), ('level', 3)])

    dummy = Dummy(b'\xa9')  # 1010 1 001

    assert dummy.flags.value == 0xa9
    assert dummy.flags.bits == (0xa, True, 1)
    assert dummy.flags.bits.kind == 0xa
    assert dummy.flags.bits.enabled is True
    assert dummy.flags.bits.level == 1


def test_bitfield_wrong_layout():
    with pytest.raises(ValueError):
        BitField('H', [('a', 4), ('b', 4)])
