'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

A PNG file is an 8 bytes signature followed by a sequence of chunks, each one made of

    length : 4 bytes, big endian, the number of bytes of data
    type   : 4 bytes, ASCII letters only
    data   : length bytes
    crc    : 4 bytes, big endian, CRC-32 of type and data

The content of the chunks is never interpreted here: it's treated as opaque data.
'''
from bitstring import Bits

from pngmsg.core import Chunk
from pngmsg import (
    fields,
)
from pngmsg.enum import ChunkProperty
from pngmsg.exceptions import (
    ChunkNotFound,
    InvalidTagByte,
    InvalidTagLength,
    NotInAllowedRange,
    PayloadTooLarge,
)
from pngmsg.properties import Dependency
from pngmsg.common import crc


# 3.1 PNG file signature
PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

# the length is an unsigned integer but the format limits it to 2^31 - 1
MAX_CHUNK_LENGTH = 2 ** 31 - 1

# the case of a letter is the bit at position 2 from the MSB (value 32) of each byte
CASE_BIT = 2


def valid_type_code(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


class ChunkType(object):
    '''The 4 bytes identifying the kind of a chunk.

    Each byte must be an uppercase or lowercase ASCII letter and the case
    of each of them encodes a property of the chunk:

     1. ancillary bit (first byte): uppercase means critical
     2. private bit (second byte): uppercase means public
     3. reserved bit (third byte): must be uppercase in this version of the format
     4. safe-to-copy bit (fourth byte): lowercase means safe to copy

    Instances are immutable and compare byte-wise.
    '''

    __slots__ = ('_raw', '_bits')

    def __init__(self, raw):
        raw = bytes(raw)

        if len(raw) != 4:
            raise InvalidTagLength(len(raw))

        for index, value in enumerate(raw):
            if not valid_type_code(value):
                raise InvalidTagByte(index=index, value=value)

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw) -> "ChunkType":
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        raw = text.encode('utf-8')

        if len(raw) != 4:
            raise InvalidTagLength(len(raw))

        try:
            return cls(raw)
        except InvalidTagByte as e:
            raise NotInAllowedRange(index=e.index, value=e.value) from e

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.as_str()})>'

    def __str__(self):
        return self.as_str()

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def raw(self) -> bytes:
        return self._raw

    def as_str(self) -> str:
        return self._raw.decode('ascii')

    def _is_uppercase(self, index: int) -> bool:
        return not self._bits[8 * index + CASE_BIT]

    def is_critical(self) -> bool:
        return self._is_uppercase(0)

    def is_public(self) -> bool:
        return self._is_uppercase(1)

    def is_reserved_bit_valid(self) -> bool:
        return self._is_uppercase(2)

    def is_safe_to_copy(self) -> bool:
        return not self._is_uppercase(3)

    def is_valid(self) -> bool:
        return self.is_reserved_bit_valid()

    @property
    def properties(self) -> ChunkProperty:
        flags = ChunkProperty.NONE

        for flag, check in (
            (ChunkProperty.CRITICAL, self.is_critical),
            (ChunkProperty.PUBLIC, self.is_public),
            (ChunkProperty.RESERVED_VALID, self.is_reserved_bit_valid),
            (ChunkProperty.SAFE_TO_COPY, self.is_safe_to_copy),
        ):
            if check():
                flags |= flag

        return flags


class ChunkTypeField(fields.Field):
    '''Field containing a ChunkType; it accepts also strings and bytes
    as values, validating them.'''

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def _get_size(self):
        return 4

    def _set_value(self, value) -> None:
        if isinstance(value, str):
            value = ChunkType.from_str(value)
        elif isinstance(value, (bytes, bytearray)):
            value = ChunkType.from_bytes(value)
        elif value is not None and not isinstance(value, ChunkType):
            raise TypeError(f"'{value.__class__.__name__}' cannot be used as chunk type")

        super()._set_value(value)

    def _get_raw(self) -> bytes:
        if self.value is None:
            raise ValueError(f"the type of the chunk is not set")

        return self.value.raw

    def unpack(self, stream):
        self.value = ChunkType.from_bytes(stream.read(self.size))


class PNGHeader(Chunk):
    magic = fields.StringField(8, default=PNG_SIGNATURE, is_magic=True)


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    A chunk is defined as critical or ancillary depending on the case of the
    starting letter of the type field.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    # Critical chunks

     1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
     2. PLTE: contains the palette data
     3. IDAT: contains the actual image data (compressed)
     4. IEND: is the terminator chunk
    '''
    length = fields.StructField('I', endianess=fields.Endianess.BIG_ENDIAN)  # big endian
    type   = ChunkTypeField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'], endianess=fields.Endianess.BIG_ENDIAN)  # network byte order

    @classmethod
    def from_data(cls, chunk_type, data: bytes) -> "PNGChunk":
        '''Build a new chunk, length and crc follow from the type and the data.'''
        if len(data) > MAX_CHUNK_LENGTH:
            raise PayloadTooLarge(size=len(data), limit=MAX_CHUNK_LENGTH)

        chunk = cls()
        chunk.type = chunk_type
        chunk.data = data

        return chunk

    @classmethod
    def parse(cls, raw) -> "PNGChunk":
        return cls(raw)

    def __str__(self):
        return f'{self.type.value} ({self.length.value} bytes, crc 0x{self.crc.value:08x})'

    @property
    def chunk_type(self) -> ChunkType:
        return self.type.value

    def checksum(self) -> int:
        return self.crc.value

    def data_as_string(self) -> str:
        return self.data.value.decode('utf-8')


class PNGFile(Chunk):
    '''The whole file: the signature followed by the chunks, in the order they appear.

    More chunks can share the same type so the order is what decides which
    one is the "first".
    '''
    header = PNGHeader()
    chunks = fields.ArrayField(PNGChunk())

    @classmethod
    def parse(cls, raw) -> "PNGFile":
        return cls(raw)

    @classmethod
    def from_chunks(cls, chunks) -> "PNGFile":
        png = cls()
        for chunk in chunks:
            png.append_chunk(chunk)

        return png

    def get_chunks(self):
        '''Read-only view of the chunks in file order.'''
        return tuple(self.chunks)

    def append_chunk(self, chunk: PNGChunk) -> None:
        self.chunks.append(chunk)

    def chunk_by_type(self, chunk_type: str):
        '''Return the first chunk with the given type, None if missing.'''
        for chunk in self.chunks:
            if chunk.chunk_type.as_str() == chunk_type:
                return chunk

        return None

    def remove_first_chunk(self, chunk_type: str) -> PNGChunk:
        for index, chunk in enumerate(self.chunks):
            if chunk.chunk_type.as_str() == chunk_type:
                return self.chunks.pop(index)

        raise ChunkNotFound(chunk_type)
