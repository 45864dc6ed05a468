import io
import logging

from .exceptions import Truncated


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around a buffer of bytes to uniform its
    properties: reading must return exactly the number of bytes requested
    otherwise the data is truncated.'''
    def __init__(self, obj=b''):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self._type.__name__)

        init_method()

    def tell(self):
        return self.obj.tell()

    def __len__(self):
        position = self.obj.tell()
        size = self.obj.seek(0, io.SEEK_END)
        self.obj.seek(position)

        return size

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def remaining(self):
        return len(self) - self.obj.tell()

    def at_end(self):
        return self.remaining() <= 0

    def read(self, size):
        '''Read exactly "size" bytes, raising Truncated if the data ends before.'''
        available = self.remaining()
        if size > available:
            raise Truncated(needed=size, available=available)

        return self.obj.read(size)

    def peek(self, size):
        '''Read at most "size" bytes without moving the offset.'''
        self.save()
        data = self.obj.read(size)
        self.restore()

        return data

    def write(self, data):
        return self.obj.write(data)

    def getvalue(self):
        return self.obj.getvalue()

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)
