class PngMsgException(Exception):
    '''Base class to extend in order to throw exception in pngmsg.

    The "chain" attribute lists the layers the exception crossed while
    unwinding, innermost first, so that the caller knows where the
    data went wrong without parsing it again.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)

    def __str__(self):
        msg = super().__str__()
        if not self.chain:
            return msg

        return '%s (at %s)' % (msg, '.'.join(reversed(self.chain)))


class UnpackException(PngMsgException):
    pass


class Truncated(UnpackException):

    def __init__(self, needed, available, chain=None):
        self.needed = needed
        self.available = available
        super().__init__(f'needed {needed} bytes but only {available} remain', chain=chain)


class InvalidTagByte(UnpackException):

    def __init__(self, index, value, chain=None):
        self.index = index
        self.value = value
        super().__init__(f'invalid byte `{value}` at index {index}', chain=chain)


class NotInAllowedRange(InvalidTagByte):

    def __init__(self, index, value, chain=None):
        super().__init__(index, value, chain=chain)
        self.character = chr(value)
        self.args = (f"invalid value `{self.character}`, acceptable range 'A-Z and a-z'",)


class InvalidTagLength(PngMsgException):

    def __init__(self, length, chain=None):
        self.length = length
        super().__init__(f'length needs to be 4, not {length}', chain=chain)


class ChecksumMismatch(UnpackException):
    '''The CRC stored into the file doesn't correspond to the data.'''

    def __init__(self, calculated, expected, chain=None):
        self.calculated = calculated
        self.expected = expected
        super().__init__(f'crc mismatch: calculated 0x{calculated:08x}, expected 0x{expected:08x}', chain=chain)


class BadSignature(UnpackException):
    '''The magic at the start of the data doesn't correspond.'''

    def __init__(self, expected, actual, chain=None):
        self.expected = expected
        self.actual = actual
        super().__init__(f'bad signature {actual!r}, expected {expected!r}', chain=chain)


class ChunkNotFound(PngMsgException):

    def __init__(self, chunk_type, chain=None):
        self.chunk_type = chunk_type
        super().__init__(f'chunk type `{chunk_type}` not found', chain=chain)


class PayloadTooLarge(PngMsgException):

    def __init__(self, size, limit, chain=None):
        self.size = size
        self.limit = limit
        super().__init__(f'payload of {size} bytes exceeds the limit of {limit} bytes', chain=chain)
