import pytest

from sfstruct.core import Record, RecordArray
from sfstruct.fields import StructField, FixedLengthString


class Dummy(Record):
    a = StructField('I')
    b = FixedLengthString(0x10)
    c = StructField('H')


def test_record():
    """Check that building a Record from fields behaves correctly."""
    data = b'\xad\x0b\x00\x00' + b'kebab'.ljust(0x10, b'\x00') + b'\xef\xbe'

    dummy = Dummy(data)

    assert dummy.a.size == 4
    assert dummy.a.raw == b'\xad\x0b\x00\x00'
    assert dummy.a.value == 0xbad
    assert dummy.a.offset == 0x00
    assert dummy.a.father is dummy

    assert dummy.b.size == 0x10
    assert dummy.b.value == b'kebab' + b'\x00' * 11
    assert dummy.b.offset == 0x04

    assert dummy.c.size == 0x2
    assert dummy.c.value == 0xbeef
    assert dummy.c.offset == 0x14

    assert dummy.size == Dummy.get_size() == 0x16
    assert dummy.raw == data


def test_record_layout():
    dummy = Dummy(bytes(Dummy.get_size()))

    assert dummy.layout == {
        'a': (0, 4),
        'b': (4, 16),
        'c': (20, 2),
    }
    assert dummy.get_ordered_fields_name() == ['a', 'b', 'c']


def test_record_wrong_size():
    with pytest.raises(ValueError):
        Dummy(b'\x00' * 3)


def test_record_inheritance():
    """The fields of the subclass follow the ones of the parent."""
    class Extended(Dummy):
        d = StructField('B')

    extended = Extended(bytes(range(Extended.get_size())))

    assert Extended.get_size() == 0x17
    assert extended.get_ordered_fields_name() == ['a', 'b', 'c', 'd']
    assert extended.d.offset == 0x16
    assert extended.d.value == 0x16


def test_record_fields_are_read_only():
    dummy = Dummy(bytes(Dummy.get_size()))

    with pytest.raises(AttributeError):
        dummy.a = 1


def test_record_is_a_view():
    """A record built from a memoryview doesn't copy the data."""
    data = bytearray(Dummy.get_size())
    dummy = Dummy(memoryview(data))

    data[0] = 0x2a

    assert dummy.a.value == 0x2a


def test_record_array():
    n = 5
    data = b''.join(bytes([_]) * Dummy.get_size() for _ in range(n))

    array = RecordArray(Dummy, data)

    assert len(array) == n
    assert [_.c.value for _ in array] == [0x0000, 0x0101, 0x0202, 0x0303, 0x0404]

    # check that the elements are not duplicated
    assert array[0] is not array[1]

    assert array[-1].c.value == 0x0404
    assert [_.c.value for _ in array[1:3]] == [0x0101, 0x0202]

    with pytest.raises(IndexError):
        array[n]

    with pytest.raises(IndexError):
        array[-n - 1]


def test_record_array_empty():
    array = RecordArray(Dummy, b'')

    assert len(array) == 0
    assert list(array) == []


def test_record_array_wrong_size():
    with pytest.raises(ValueError):
        RecordArray(Dummy, b'\x00' * (Dummy.get_size() + 1))
