import pytest

from pngmsg.core import Chunk
from pngmsg.exceptions import Truncated
from pngmsg.fields import StructField, StringField
from pngmsg.properties import Dependency


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    class Dummy(Chunk):
        a = StructField('I', default=0xbad)
        b = StringField(0x10)
        c = StructField('I', default=0xdeadbeef)

    dummy = Dummy()

    assert dummy.get_ordered_fields_name() == ['a', 'b', 'c']

    assert dummy.a.size == 4
    assert dummy.a.raw == b'\xad\x0b\x00\x00'
    assert dummy.a.value == 0xbad
    assert dummy.a.father == dummy

    assert dummy.b.size == 0x10
    assert dummy.b.raw == b'\x00' * 0x10

    assert dummy.c.size == 0x4
    assert dummy.c.raw == b'\xef\xbe\xad\xde'

    assert dummy.size == 0x18
    assert len(dummy.raw) == dummy.size
    assert dummy.pack() == dummy.raw
    assert dummy.raw == (
        b'\xad\x0b\x00\x00' +
        b'\x00' * 0x10 +
        b'\xef\xbe\xad\xde'
    )

    assert [dummy.a.offset, dummy.b.offset, dummy.c.offset] == [0, 4, 20]


def test_chunk_instances_are_independent():
    class Dummy(Chunk):
        a = StructField('I')

    first = Dummy()
    second = Dummy()

    first.a = 0xcafe

    assert first.a is not second.a
    assert first.a.value == 0xcafe
    assert second.a.value == 0


def test_chunk_inheritance():
    class Base(Chunk):
        a = StructField('B')

    class Derived(Base):
        b = StructField('B', default=0x42)

    derived = Derived()

    assert derived.get_ordered_fields_name() == ['a', 'b']
    assert derived.raw == b'\x00\x42'


def test_chunk_w_dependencies():
    class Example(Chunk):
        sz = StructField('I')
        data = StringField(Dependency('.sz'), default=b'kebab')

    example = Example()

    assert example.sz.father == example
    assert example.sz.value == 5
    assert example.data.value == b'kebab'

    example.data = b'miao miao'

    assert example.sz.value == 9
    assert example.raw == b'\x09\x00\x00\x00miao miao'


def test_chunk_unpack():
    class Example(Chunk):
        sz = StructField('I')
        data = StringField(Dependency('.sz'))
        tail = StructField('B')

    example = Example(b'\x03\x00\x00\x00abc\xff')

    assert example.sz.value == 3
    assert example.data.value == b'abc'
    assert example.tail.value == 0xff
    assert [example.sz.offset, example.data.offset, example.tail.offset] == [0, 4, 7]


def test_chunk_unpack_error_chain():
    class Inner(Chunk):
        sz = StructField('I')
        data = StringField(Dependency('.sz'))

    class Outer(Chunk):
        magic = StringField(2, default=b'OK')
        inner = Inner()

    with pytest.raises(Truncated) as e:
        Outer(b'OK\x05\x00\x00\x00ab')

    assert e.value.needed == 5
    assert e.value.available == 2
    assert e.value.chain == ['data', 'inner']
    assert 'inner.data' in str(e.value)
