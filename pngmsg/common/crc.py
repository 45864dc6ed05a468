'''
We are implementing fields to handle CRC calculation.
'''
from zlib import crc32

from .. import fields
from ..exceptions import ChecksumMismatch


class CRCField(fields.StructField):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.

    The value is always calculated from the sibling fields, so it can't go out
    of sync with them; unpacking checks the stored value against it.
    """

    def __init__(self, fields, *args, **kwargs):
        self.fields = fields
        super().__init__('I', *args, **kwargs)

    def calculate(self):
        value = b''.join([getattr(self.father, field_name).raw for field_name in self.fields])

        return crc32(value)

    def _get_value(self):
        if self.father is None:
            return super()._get_value()

        return self.calculate()

    def unpack(self, stream):
        expected = self._unpack(stream.read(self.size))
        calculated = self.calculate()

        if calculated != expected:
            raise ChecksumMismatch(calculated=calculated, expected=expected)
