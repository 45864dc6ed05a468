"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without sub-components.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency
from .streams import Stream
from .exceptions import PngMsgException, BadSignature


class Field(FieldBase):
    """Base class to subclass from"""

    logger = logging.getLogger(__name__)

    def __init__(self, name=None, father=None, default=None, endianess=Endianess.LITTLE_ENDIAN):
        super().__init__()
        self.name = name
        self.father = father
        self.default = default
        self.offset = None
        self.endianess = endianess

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    def _get_value(self):
        return self._value

    def _set_value(self, value) -> None:
        self._value = value

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    raw = property(
        fget=lambda self: self._get_raw(),
    )

    def pack(self, stream=None):
        '''Write the binary representation into the stream and return
        all the data written into it so far.'''
        stream = Stream() if stream is None else stream

        self.offset = stream.tell()
        stream.write(self.raw)

        return stream.getvalue()

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def __str__(self):
        width = self.size * 2  # we want to be as large as possible
        formatter = '0x%%0%dx' % width
        return formatter % (self.value,)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _get_raw(self) -> bytes:
        return struct.pack(self.get_format(), self.value)

    def _unpack(self, raw: bytes) -> int:
        return struct.unpack(self.get_format(), raw)[0]

    def unpack(self, stream):
        self.value = self._unpack(stream.read(self.size))


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed (an integer) or a Dependency on another field,
    in the latter case setting the value updates the field it depends on.

    With is_magic=True the content read must be equal to the default otherwise
    BadSignature is raised.
    """

    def __init__(self, n=None, is_magic=False, **kw):
        if n is None and kw.get('default') is None:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self._length = n if n is not None else len(kw['default'])
        self.is_magic = is_magic

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    @property
    def length(self):
        if not isinstance(self._length, Dependency):
            return self._length

        if self.father is None:
            return len(self.value)

        return self._length.resolve(self)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'' if isinstance(self._length, Dependency) else b'\x00' * self._length

    def _get_size(self):
        return len(self.value)

    def _set_value(self, value) -> None:
        """The StringField has the size as a parameter and we must follow that indication
        unless it's a Dependency, in that case we are going to write back the length where necessary."""
        value = bytes(value)

        if isinstance(self._length, Dependency):
            if self.father is not None:
                self._length.resolve_and_set(self, len(value))
        elif len(value) != self._length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self._length} bytes)')

        self._value = value

    def _get_raw(self):
        return self.value

    def unpack(self, stream):
        length = self.length

        if self.is_magic:
            magic = stream.peek(length)
            if magic != self.default:
                self.logger.debug('the magic doesn\'t correspond: %r', magic)
                raise BadSignature(expected=self.default, actual=magic)

        # the length is already in place, no need to write it back
        self._value = stream.read(length)


class ArrayField(Field):
    '''Un/Pack an array of Chunks.

    The elements are unpacked back to back until the stream is exhausted: the
    array is meant to be the last field of the outermost chunk.

    This class must behave like a list in python, obviously cannot implement all the methods.
    '''

    def __init__(self, field_cls, **kw):
        self.field_cls = field_cls
        kw.setdefault('default', [])

        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def value_from_default(self):
        return list(self.default)

    def _get_raw(self):
        return b''.join([element.raw for element in self.value])

    def _get_size(self):
        return sum([element.size for element in self.value])

    def pack(self, stream=None):
        stream = Stream() if stream is None else stream

        self.offset = stream.tell()
        for element in self.value:
            element.pack(stream)

        return stream.getvalue()

    def instance_element(self):
        return self.field_cls.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        elements = []

        while not stream.at_end():
            offset = stream.tell()
            self.logger.debug('unpacking element %d of \'%s\' at offset %d' % (len(elements), self.name, offset))

            element = self.instance_element()
            try:
                element.unpack(stream)
            except PngMsgException as e:
                e.chain.append(str(len(elements)))
                raise

            element.offset = offset
            elements.append(element)

        self.value = elements

    def append(self, element):
        element.father = self
        self.value.append(element)

    def pop(self, index):
        '''Remove and return the element: it is detached from the array but its
        own fields still belong to it, so it can be read, packed or appended again.'''
        element = self.value.pop(index)
        element.father = None

        return element
