from enum import Enum, Flag, auto


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE  = 0
    SIZE  = 1 << 0


class ElementKind(Enum):
    '''How the payload of an element is interpreted'''
    CONTAINER    = auto()
    UNSIGNED_INT = auto()
    FLOAT        = auto()
    OPAQUE       = auto()


class ElementType(Enum):
    '''Type declared by the format for an element id.

    Only three of them are actually interpreted, all the others are
    carried around as raw bytes.'''
    MASTER = auto()
    UINT   = auto()
    INT    = auto()
    FLOAT  = auto()
    STRING = auto()
    UTF8   = auto()
    DATE   = auto()
    BINARY = auto()

    @property
    def kind(self) -> ElementKind:
        return _TYPE2KIND.get(self, ElementKind.OPAQUE)


_TYPE2KIND = {
    ElementType.MASTER: ElementKind.CONTAINER,
    ElementType.UINT: ElementKind.UNSIGNED_INT,
    ElementType.FLOAT: ElementKind.FLOAT,
}
