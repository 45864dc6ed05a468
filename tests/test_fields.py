import pytest

from pngmsg.exceptions import Truncated
from pngmsg.fields import StructField, StringField, ArrayField, Endianess
from pngmsg.streams import Stream


def test_structfield_conversion_raw_value():
    """Check that the attributes "value" and "raw" are the analogous
    of the integers and bytes representation for a field."""
    field = StructField('I')

    assert field.size == 4
    assert field.raw == b'\x00\x00\x00\x00'
    assert field.value == 0

    field.value = 0xcafe

    assert field.value == 0xcafe
    assert field.raw == b'\xfe\xca\x00\x00'


def test_structfield_big_endian():
    field = StructField('I', endianess=Endianess.BIG_ENDIAN)

    field.unpack(Stream(b'\x01\x02\x03\x04'))

    assert field.value == 0x01020304
    assert field.raw == b'\x01\x02\x03\x04'
    assert str(field) == '0x01020304'


def test_structfield_truncated():
    field = StructField('I')

    with pytest.raises(Truncated) as e:
        field.unpack(Stream(b'\x01\x02'))

    assert e.value.needed == 4
    assert e.value.available == 2


def test_stringfield():
    field = StringField(0x10)

    assert field.size == 0x10
    assert len(field.raw) == field.size
    assert field.raw == b'\x00' * field.size

    with pytest.raises(ValueError):
        field.value = b'kebab'

    data = b''.join([bytes([_]) for _ in range(0x10)])

    field.value = data

    assert field.value == data
    assert field.raw == data


def test_stringfield_needs_length():
    with pytest.raises(ValueError):
        StringField()


def test_arrayfield():
    array = ArrayField(StructField('I'))

    assert isinstance(array.value, list)
    assert len(array) == 0
    assert array.raw == b''

    array.unpack(Stream(b'\x01\x00\x00\x00\x02\x00\x00\x00'))

    assert len(array) == 2
    assert [_.value for _ in array] == [1, 2]
    assert array[0] is not array[1]
    assert array[1].offset == 4
    assert array[0].father is array

    element = array.pop(0)

    assert element.value == 1
    assert element.father is None
    assert array.raw == b'\x02\x00\x00\x00'


def test_arrayfield_truncated_element():
    array = ArrayField(StructField('I'))

    with pytest.raises(Truncated) as e:
        array.unpack(Stream(b'\x01\x00\x00\x00\x02\x00'))

    assert e.value.chain == ['1']
    # nothing is left half unpacked
    assert len(array) == 0


def test_stream():
    stream = Stream(bytearray(b'kebab'))

    assert len(stream) == 5
    assert stream.peek(10) == b'kebab'
    assert stream.read(2) == b'ke'
    assert stream.tell() == 2
    assert stream.remaining() == 3
    assert not stream.at_end()

    with pytest.raises(Truncated):
        stream.read(4)

    assert stream.read(3) == b'bab'
    assert stream.at_end()


def test_stream_wrong_type():
    with pytest.raises(ValueError):
        Stream(42)
