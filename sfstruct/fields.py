"""
A Field is "fundamental" datatype from the format point of view, something directly
decodable from the bytes of the record it belongs to.

The fields don't own any data: they know their offset inside the record
and read through the memoryview of the record itself (the "father").
"""
import logging
import struct
from collections import namedtuple

from bitstring import BitArray

from .meta import FieldBase, Endianess


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, offset=None, endianess=Endianess.LITTLE_ENDIAN):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.offset = offset
        self.endianess = endianess

    def __str__(self):
        return str(self.value)

    def get_backend(self) -> memoryview:
        """This is the memoryview of the record the field belongs to."""
        if self.father is None:
            raise AttributeError(f"field '{self.name}' is not bound to any record")

        return self.father.data

    value = property(
        fget=lambda self: self._get_value(),
    )

    def _get_value(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_value() not implemented")

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        offset = self.offset if self.offset is not None else 0
        return self.get_backend()[offset:offset + self.size].tobytes()

    raw = property(
        fget=lambda self: self._get_raw(),
    )


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself.
    """

    def __init__(self, format, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(**kw)

    def __repr__(self):
        if self.father is None:
            return '<%s(%s)>' % (self.__class__.__name__, self.format)

        if not self.enum:
            return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

        return f'<{self.__class__.__name__}({self.value!r})>'

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _get_value(self):
        value = struct.unpack_from(
            self.get_format(),
            self.get_backend(),
            self.offset if self.offset is not None else 0)[0]

        if self.enum:
            value = self._unpack_enum(value)

        return value

    def _unpack_enum(self, value: int):
        try:
            return self.enum(value)
        except ValueError:
            self.logger.warning(f'enum {self.enum.__name__} doesn\'t have element with value 0x{value:x} in it')

        return value


class FixedLengthString(Field):
    """This field can contain only binary strings with fixed length."""

    def __init__(self, length, **kw):
        self.length = length
        super().__init__(**kw)

    def __repr__(self):
        if self.father is None:
            return '<%s(%d)>' % (self.__class__.__name__, self.length)

        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def _get_size(self):
        return self.length

    def _get_value(self):
        return self.raw


class BitField(StructField):
    """Integer field packing several groups of bits.

    The layout is a list of (name, width) couples starting from the most
    significant bit: the attribute "bits" returns a namedtuple with an entry
    for each group.

        class Dummy(Record):
            flags = fields.BitField('B', [('kind', 4), ('enabled', 1), ('level', 3)])
    """

    def __init__(self, format, layout, **kw):
        super().__init__(format, **kw)
        self.layout = layout
        self._tuple = namedtuple(f'{self.__class__.__name__}Bits', [_name for _name, _ in layout])

        if sum(_width for _, _width in layout) != self.size * 8:
            raise ValueError(f'layout of {self.__class__.__name__} doesn\'t cover {self.size * 8} bits')

    @property
    def bits(self):
        array = BitArray(uint=self.value, length=self.size * 8)

        values = []
        position = 0
        for _, width in self.layout:
            group = array[position:position + width]
            values.append(group.uint if width > 1 else bool(group[0]))
            position += width

        return self._tuple(*values)
