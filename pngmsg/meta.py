import copy
import logging
from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldDescriptor(object):
    """Wrapper around field access of a Field related class.

    The field declared in the class body works as a prototype: each
    instance of the chunk gets its own copy the first time it's accessed.
    """

    def __init__(self, field_instance: "Field", field_name: str):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name not in data:
            self.logger.debug("create new field for field named '%s'", self.field.name)
            data[self.field.name] = self.field.create(father=instance)

        return data[self.field.name]

    def __set__(self, instance, value):
        self.logger.debug("__set__ from %s for field named '%s'", instance.__class__.__name__, self.field.name)
        data = instance.__dict__

        # if the value is the same type then set as it is
        if isinstance(value, self.field.__class__):
            value.father = instance
            value.name = self.field.name
            data[self.field.name] = value
        # otherwise delegate to the field
        else:
            self.__get__(instance).value = value


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name in cls._meta.fields[:-1]:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        setattr(cls, name, FieldDescriptor(self, name))

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []


class MetaChunk(type):
    """Collects the fields declared in the class body keeping the order
    of declaration, that is the order they appear into the data."""

    logger = logging.getLogger(__name__)

    def __new__(cls, name, bases, attrs):
        fields = {k: v for k, v in attrs.items() if isinstance(v, FieldBase)}
        new_attrs = {k: v for k, v in attrs.items() if k not in fields}

        new_cls = super(MetaChunk, cls).__new__(cls, name, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance, the descriptors are inherited as usual
        for parent in bases:
            if isinstance(parent, MetaChunk):
                new_cls._meta.fields.extend(parent._meta.fields)

        for obj_name, obj in fields.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        cls.logger.debug('contribute_to_chunk() found for field \'%s\'' % name)
        cls._meta.fields.append(name)
        value.contribute_to_chunk(cls, name)
