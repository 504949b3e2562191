'''
# Variable length integers

EBML encodes both the element ids and the element sizes with a self-describing
integer: the position of the first bit set in the leading byte tells how many
bytes (from 1 to 8) compose the number

    1xxx xxxx                                  -> 1 byte,  7 bits of value
    01xx xxxx  xxxx xxxx                       -> 2 bytes, 14 bits of value
    001x xxxx  xxxx xxxx  xxxx xxxx            -> 3 bytes, 21 bits of value
    ...
    0000 0001  xxxx xxxx  ...  xxxx xxxx       -> 8 bytes, 56 bits of value

The marker bit is stripped from the value, this is true also for the ids: an
element id is always handled in its marker-stripped form (e.g. Segment is
0x8538067 and not 0x18538067).
'''
import logging

from .exceptions import VintException


logger = logging.getLogger(__name__)

MAX_WIDTH = 8

# all the value bits set in the widest encoding
UNKNOWN_SIZE = 2 ** (7 * MAX_WIDTH) - 1


def decode(data, offset=0):
    '''Read a VINT from data starting at offset.

    Returns a couple (value, number of bytes consumed).'''
    if offset < 0 or offset >= len(data):
        raise VintException(chain=[], msg=f'offset {offset} out of buffer of length {len(data)}')

    lead = data[offset]
    if lead == 0:
        raise VintException(chain=[], msg=f'invalid leading byte at offset {offset}')

    width = MAX_WIDTH - lead.bit_length() + 1

    if offset + width > len(data):
        raise VintException(chain=[], msg=f'truncated {width} bytes VINT at offset {offset}')

    value = lead - 2 ** (8 - width)
    for idx in range(1, width):
        value = value * 256 + data[offset + idx]

    return value, width


def width(value):
    '''Number of bytes needed to encode value.'''
    if value < 0:
        raise VintException(chain=[], msg=f'negative value {value} cannot be encoded')

    for _width in range(1, MAX_WIDTH + 1):
        if value < 2 ** (7 * _width):
            return _width

    raise VintException(chain=[], msg=f'value 0x{value:x} too big to be encoded')


def encode(value, draft=False):
    '''Encode value with the minimal width.

    With draft set only the width is calculated and returned, nothing is
    encoded: this is what the relayout uses.'''
    _width = width(value)

    if draft:
        return _width

    encoded = (value + 2 ** (7 * _width)).to_bytes(_width, 'big')

    logger.debug('encoded 0x%x as %s', value, encoded.hex())

    return encoded
