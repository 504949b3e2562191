"""
# ebmlfix: fix the duration of browser recorded WebM clips.

An EBML file (WebM, Matroska) is a tree of elements, each one made of an
id, a size and a payload; the payload of a container element is itself a
sequence of elements.

Three basic operations are defined for the elements:

 1. unpack(): read the binary data and build a high-level representation
    of it, recursing into the containers.

 2. relayout(): compute sizes and offsets of an element and its
    subelements without encoding anything.

 3. pack(): encode the high-level representation into binary data, using
    the layout computed by relayout().

On top of these fix_duration() inserts or patches the Duration field in
Segment/Info and fix_binary_resource() applies it to a whole clip returning
the original one when nothing needs (or can) be fixed.
"""
from .core import Container, parse, serialize
from .duration import fix_duration
from .resource import Blob, fix_binary_resource, fix_bytes


__all__ = [
    'Blob',
    'Container',
    'fix_binary_resource',
    'fix_bytes',
    'fix_duration',
    'parse',
    'serialize',
]
