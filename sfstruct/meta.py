import copy
import logging
from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldDescriptor(object):
    """Wrapper around field access of a Record related class."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        # accessing from the class gives back the template
        if instance is None:
            return self.field

        # never stored into the instance: a field/record cycle keeps the buffer exported
        return self.field.create(father=instance)

    def __set__(self, instance, value):
        raise AttributeError(f"field '{self.field.name}' is read-only")


class FieldBase(object):

    def contribute_to_record(self, cls, name):
        if not getattr(cls, name, None):
            setattr(cls, name, FieldDescriptor(self, name))
        else:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

    def create(self, father):
        instance = copy.copy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the layout"""

    def __init__(self):
        self.fields = []
        self.size = 0


class MetaRecord(type):

    def __new__(cls, names, bases, attrs):
        '''The fields are laid out in declaration order without any padding:
        each one starts where the previous one ends.'''
        module = attrs.pop('__module__')
        classcell = attrs.pop('__classcell__', None)

        new_attrs = {
            '__module__': module,
        }
        if classcell is not None:
            new_attrs['__classcell__'] = classcell
        new_cls = super(MetaRecord, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaRecord)]
        for parent in parents:
            for obj_name in parent._meta.fields:
                obj = parent.__dict__[obj_name]
                setattr(new_cls, obj_name, obj)
                new_cls._meta.fields.append(obj_name)
            new_cls._meta.size += parent._meta.size

        cls.logger = logging.getLogger(__name__)

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        if hasattr(value, 'contribute_to_record'):
            cls.logger.debug('contribute_to_record() found for field \'%s\' at offset %d' % (name, cls._meta.size))
            value.offset = cls._meta.size
            cls._meta.fields.append(name)
            cls._meta.size += value.size
            value.contribute_to_record(cls, name)
        else:
            setattr(cls, name, value)
