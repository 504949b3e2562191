"""
An Element is the unit of the EBML format: an id, a size and a payload. The
leaves are the scalar (and opaque) elements defined here, the Container that
nests them lives in the core module.

Each element has two representations of the same data:

 - raw: the payload bytes (without id and size)
 - value: the decoded python object

the one set for last is the authoritative one and the other is derived
lazily when accessed. Setting either of them on an element makes the raw
of all its fathers stale, so that they are repacked when needed.
"""
import logging

from bitstring import Bits

from . import registry
from . import vint
from .enum import ElementKind


DEFAULT_FLOAT_WIDTH = 8

FLOAT_WIDTHS = (4, 8)


class Element(object):
    """Base class to subclass from"""
    kind = ElementKind.OPAQUE

    def __init__(self, element_id, value=None, raw=None, father=None):
        self.logger = logging.getLogger(__name__)
        self.id = element_id
        self.father = father
        self.offset = None
        self._size = None
        self._raw = b''
        self._value = None
        self._raw_stale = False
        self._value_stale = False

        if value is not None:
            self.value = value
        elif raw is not None:
            self.raw = raw
        else:
            self.value = self.value_from_default()

    def __repr__(self):
        return '<%s(%s=%r)>' % (self.__class__.__name__, self.name, self.value)

    def __str__(self):
        return str(self.value)

    @property
    def name(self) -> str:
        if self.id is None:
            return 'File'

        return registry.lookup(self.id)[0]

    def value_from_default(self):
        return b''

    def decode(self, raw: bytes):
        raise NotImplementedError(f"method {self.__class__.__name__}.decode() not implemented")

    def encode(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.encode() not implemented")

    def _get_value(self):
        if self._value_stale:
            self._value = self.decode(self._raw)
            self._value_stale = False

        return self._value

    def _set_value(self, value) -> None:
        self._value = value
        self._value_stale = False
        self._raw_stale = True
        self._size = None
        self._invalidate_fathers()

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    def _get_raw(self) -> bytes:
        if self._raw_stale:
            self._raw = self.encode(self._value)
            self._raw_stale = False

        return self._raw

    def _set_raw(self, raw) -> None:
        self._raw = bytes(raw)
        self._raw_stale = False
        self._value_stale = True
        self._invalidate_fathers()

    raw = property(
        fget=lambda self: self._get_raw(),
        fset=lambda self, raw: self._set_raw(raw))

    def _get_size(self) -> int:
        return len(self.raw)

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _invalidate_fathers(self):
        father = self.father
        while father is not None:
            father._raw_stale = True
            father._size = None
            father = father.father

    def header_size(self, size) -> int:
        '''Bytes needed by the id and the size of this element, without
        actually encoding them.'''
        if self.id is None:
            return 0

        return vint.encode(self.id, draft=True) + vint.encode(size, draft=True)

    def unpack(self, raw: bytes):
        '''Set the payload and decode it immediately, this doesn't touch the fathers.'''
        self._raw = bytes(raw)
        self._raw_stale = False
        self._value = self.decode(self._raw)
        self._value_stale = False

        return self

    def relayout(self, offset=0) -> int:
        '''Set the offset of this element inside the payload of its father and
        return the number of bytes it needs (header included).'''
        self.offset = offset
        size = self.size

        return self.header_size(size) + size

    def refresh(self):
        self.raw

        return self


class OpaqueElement(Element):
    """Payload carried around as it is: binary, strings, signed integers and
    everything not known."""

    def __repr__(self):
        return '<%s(%s, %d bytes)>' % (self.__class__.__name__, self.name, len(self.raw))

    def decode(self, raw):
        return raw

    def encode(self, value):
        return bytes(value)


class UnsignedIntElement(Element):
    """Big-endian unsigned integer of variable width."""
    kind = ElementKind.UNSIGNED_INT

    def __repr__(self):
        return '<%s(%s=0x%x)>' % (self.__class__.__name__, self.name, self.value)

    def value_from_default(self):
        return 0

    def decode(self, raw):
        if not raw:
            return 0

        return Bits(raw).uint

    def encode(self, value):
        if value < 0:
            raise ValueError(f'{self.name} can\'t hold the negative value {value}')

        width = max(1, (value.bit_length() + 7) // 8)

        return Bits(uint=value, length=width * 8).bytes


class FloatElement(Element):
    """IEEE-754 big-endian float: the width (4 or 8 bytes) is the one found
    while unpacking and it's kept when the value is changed."""
    kind = ElementKind.FLOAT

    def __init__(self, element_id, value=None, raw=None, father=None, width=DEFAULT_FLOAT_WIDTH):
        self.width = width
        super().__init__(element_id, value=value, raw=raw, father=father)

    def value_from_default(self):
        return 0.0

    def decode(self, raw):
        if len(raw) in FLOAT_WIDTHS:
            self.width = len(raw)
            return Bits(raw).float

        if raw:
            self.logger.warning('%s has a float of %d bytes, not supported, it\'s read as zero', self.name, len(raw))

        return 0.0

    def encode(self, value):
        return Bits(float=float(value), length=self.width * 8).bytes
