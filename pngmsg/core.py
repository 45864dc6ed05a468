"""
Core module for the abstraction of a file format

"""
from typing import Tuple, List

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import PngMsgException


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: a Chunk is
    an ordered sequence of fields, declared as class attributes, that are
    unpacked and packed in the order of declaration.

    A Chunk can contain sub-chunks, it's enough to use an instance of the
    sub-chunk as a field.

    Passing the binary data to the constructor unpacks it.
    """

    def __init__(self, data=None, **kwargs):
        super().__init__(**kwargs)

        if data is not None:
            stream = data if isinstance(data, Stream) else Stream(data)
            self.logger.debug('unpacking \'%s\' from %d bytes' % (self.__class__.__name__, len(stream)))
            self.unpack(stream)

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
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self):
        return self

    def _set_value(self, value):
        raise ValueError(f"a chunk like '{self.__class__.__name__}' can only be replaced by an instance of the same class")

    def _get_size(self):
        '''the size MUST be derived from the subchunks'''
        return sum([field.size for _, field in self.get_fields()])

    def _get_raw(self):
        return b''.join([field.raw for _, field in self.get_fields()])

    def pack(self, stream=None):
        '''Write each field into the stream, updating the offsets, and return
        the data written so far.'''
        stream = Stream() if stream is None else stream

        self.offset = stream.tell()
        for field_name, field in self.get_fields():
            self.logger.debug('packing %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))
            field.pack(stream)

        return stream.getvalue()

    def unpack(self, stream):
        '''Take the binary data and transform it in the representation given by
        the class, field after field.

        Any error raised by a field reaches the caller with the name of the
        field appended to its chain.
        '''
        self.offset = stream.tell()
        for field_name, field in self.get_fields():
            offset = stream.tell()
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, offset))

            try:
                field.unpack(stream)
            except PngMsgException as e:
                e.chain.append(field_name)
                raise

            field.offset = offset
