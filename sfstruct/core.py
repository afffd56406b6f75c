"""
Core module for the abstraction of a fixed layout record

"""
import logging
from typing import Dict, List, Tuple

from .fields import Field
from .meta import MetaRecord


logger = logging.getLogger(__name__)


class Record(metaclass=MetaRecord):
    """
    Together with Field is the main class that defines a layout: the fields
    declared as class attributes are laid out one after the other, in the
    order of declaration, without padding.

    A Record doesn't copy anything: it's a view over the memoryview passed
    at construction, that must be exactly as long as the layout.

        class Version(Record):
            wMajor = fields.StructField('H')
            wMinor = fields.StructField('H')

        version = Version(b'\\x02\\x00\\x01\\x00')
        version.wMajor.value  # 2
    """

    def __init__(self, data):
        data = memoryview(data)
        if len(data) != self.get_size():
            raise ValueError(f'{self.__class__.__name__} needs {self.get_size()} bytes, {len(data)} given')

        self.data = data

    @classmethod
    def get_size(cls) -> int:
        return cls._meta.size

    @property
    def size(self) -> int:
        return self.get_size()

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name in self._meta.fields:
            field = getattr(self, field_name)
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    @property
    def raw(self) -> bytes:
        return self.data.tobytes()

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result


class RecordArray(object):
    '''Sequence of records laid out contiguously into a memoryview.

    The records are created when accessed, so building the array costs nothing
    whatever the number of elements. It behaves like a read-only list: indexing
    (negative too), slicing (that returns a list), len() and iteration.
    '''

    def __init__(self, record_cls, data):
        self.record_cls = record_cls
        self.data = memoryview(data)
        self._record_size = record_cls.get_size()

        if len(self.data) % self._record_size:
            raise ValueError(f'{len(self.data)} bytes are not a multiple of {record_cls.__name__}')

        self._n = len(self.data) // self._record_size

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.record_cls.__name__} x {self._n})>'

    def __len__(self):
        return self._n

    def __getitem__(self, item):
        if isinstance(item, slice):
            return [self[_] for _ in range(*item.indices(self._n))]

        if item < 0:
            item += self._n

        if not 0 <= item < self._n:
            raise IndexError(f'{self.record_cls.__name__} index out of range')

        offset = item * self._record_size

        return self.record_cls(self.data[offset:offset + self._record_size])

    def __iter__(self):
        for idx in range(self._n):
            yield self[idx]
