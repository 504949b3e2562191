"""
Core module: the Container element together with the parsing and the
serialization of an EBML tree.

The serialization is done in two passes since the size of an element is
written before its content:

 1. relayout(): walks the tree computing the size of each element and its
    offset inside the payload of the father, without writing anything
 2. pack(): allocates a buffer of exactly the computed size and writes each
    element header and payload at the offset found in the previous pass
"""
import logging
from typing import Iterator, List, Optional, Tuple

from . import registry
from . import vint
from .enum import Compliant, ElementKind
from .exceptions import (
    ChunkUnpackException,
    PackException,
    UnpackException,
    VintException,
)
from .fields import (
    Element,
    FloatElement,
    OpaqueElement,
    UnsignedIntElement,
)
from .streams import Stream


logger = logging.getLogger(__name__)


class Container(Element):
    """
    Element whose payload is a sequence of elements: its value is the ordered
    list of couples (id, element) and the order is kept when packing.

    The root of a file is a Container without id (and so without header).
    """
    kind = ElementKind.CONTAINER

    def __init__(self, element_id=None, value=None, raw=None, father=None, compliant=Compliant.NONE):
        self.compliant = compliant
        super().__init__(element_id, value=value, raw=raw, father=father)

    def __repr__(self):
        return '<%s(%s, %d children)>' % (self.__class__.__name__, self.name, len(self.value))

    def __str__(self):
        return '\n'.join('%s%r' % ('  ' * depth, element) for depth, element in self.walk())

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        return []

    def is_compliant(self, level):
        return bool(self.compliant & level)

    def _set_value(self, value) -> None:
        for _, element in value:
            element.father = self
        super()._set_value(list(value))

    def find(self, element_id) -> Optional[Element]:
        '''Linear scan of the direct children: returns the first with the given id.'''
        for child_id, child in self.value:
            if child_id == element_id:
                return child

        return None

    def children_named(self, name) -> List[Element]:
        return [child for _, child in self.value if child.name == name]

    def append(self, element_id, element):
        element.father = self
        self.value.append((element_id, element))
        self._raw_stale = True
        self._size = None
        self._invalidate_fathers()

    def walk(self, depth=0) -> Iterator[Tuple[int, Element]]:
        '''Pre-order iteration over the descendants with their depth.'''
        for _, child in self.value:
            yield depth, child
            if isinstance(child, Container):
                yield from child.walk(depth=depth + 1)

    def decode(self, raw) -> List[Tuple[int, Element]]:
        '''Parse the payload as a sequence of elements.

        A length going past the end of the payload is clamped (unless the
        SIZE compliance is requested), an unknown id becomes an opaque element.'''
        children = []
        cursor = 0
        length_raw = len(raw)

        while cursor < length_raw:
            start = cursor
            element_id, consumed = vint.decode(raw, cursor)
            cursor += consumed
            size, consumed = vint.decode(raw, cursor)
            cursor += consumed

            element = element_from_id(element_id, compliant=self.compliant)

            end = cursor + size
            if end > length_raw:
                if self.is_compliant(Compliant.SIZE):
                    raise UnpackException(
                        chain=[element.name],
                        msg=f'{element.name} of size {size} goes past the end of {self.name}')

                self.logger.debug('clamping %s at offset %d: size %d but only %d bytes left',
                                  element.name, cursor, size, length_raw - cursor)
                end = length_raw

            self.logger.debug('unpacking %s.%s at offset %d (%d bytes)', self.name, element.name, cursor, end - cursor)

            try:
                element.unpack(raw[cursor:end])
            except (VintException, UnpackException, ChunkUnpackException) as e:
                raise ChunkUnpackException(chain=[element.name] + e.chain) from e

            element.father = self
            element.offset = start
            children.append((element_id, element))
            cursor = end

        return children

    def _get_size(self) -> int:
        if not self._raw_stale:
            return len(self._raw)

        if self._size is None:
            self.relayout(offset=self.offset or 0)

        return self._size

    def _get_raw(self) -> bytes:
        if self._raw_stale:
            raw = self.pack()
            self._raw = raw
            self._raw_stale = False

        return self._raw

    def relayout(self, offset=0) -> int:
        '''This is the draft pass: the offsets and sizes of the children are
        calculated recursively but nothing is encoded.

        A container whose raw is still valid is not traversed.'''
        self.offset = offset

        if not self._raw_stale:
            size = len(self._raw)
            return self.header_size(size) + size

        size = 0
        for _, child in self.value:
            self.logger.debug('relayouting %s.%s', self.name, child.name)
            size += child.relayout(offset=size)

        self._size = size

        return self.header_size(size) + size

    def pack(self, stream=None, base=0, relayout=True) -> bytes:
        '''Write the payload of this container.

        Without a stream a new one of the exact size is allocated and its
        content returned; otherwise the payload is written into the stream
        starting from base.'''
        if relayout:
            self.relayout(offset=self.offset or 0)

        size = self.size
        is_owner = stream is None

        if is_owner:
            stream = Stream(size)

        stream.seek(base)

        if not self._raw_stale:
            stream.write(self._raw)
        else:
            for element_id, child in self.value:
                child_size = child.size
                stream.seek(base + child.offset)
                self.logger.debug('packing %s.%s at offset %d (%d bytes)',
                                  self.name, child.name, base + child.offset, child_size)
                stream.write(vint.encode(element_id))
                stream.write(vint.encode(child_size))

                if isinstance(child, Container):
                    child.pack(stream=stream, base=stream.tell(), relayout=False)
                else:
                    stream.write(child.raw)

        if stream.tell() != base + size:
            raise PackException(
                chain=[self.name],
                msg=f'{self.name}: written {stream.tell() - base} bytes instead of {size}')

        if not is_owner:
            return b''

        data = stream.getvalue()

        if len(data) != size:
            raise PackException(chain=[self.name], msg=f'{self.name}: buffer of {len(data)} bytes instead of {size}')

        return data

    def refresh(self):
        '''Re-derive bottom-up the raw of the children and then of itself.'''
        for _, child in self.value:
            child.refresh()

        self.raw

        return self


KIND2ELEMENT = {
    ElementKind.CONTAINER: Container,
    ElementKind.UNSIGNED_INT: UnsignedIntElement,
    ElementKind.FLOAT: FloatElement,
    ElementKind.OPAQUE: OpaqueElement,
}


def element_from_id(element_id, compliant=Compliant.NONE) -> Element:
    '''Instance an empty element of the class indicated by the registry.'''
    _, kind = registry.lookup(element_id)
    cls = KIND2ELEMENT[kind]

    if cls is Container:
        return cls(element_id, compliant=compliant)

    return cls(element_id)


def parse(data, compliant=Compliant.NONE) -> Container:
    '''Build the tree from the given bytes: the returned container is the root
    and has no id.'''
    root = Container(compliant=compliant)

    logger.debug('parsing %d bytes', len(data))

    return root.unpack(data)


def serialize(container: Container) -> bytes:
    return container.refresh().raw
