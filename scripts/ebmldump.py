#!/usr/bin/env python3
'''
Dump the element tree of an EBML file (WebM, Matroska).

    $ ebmldump.py recording.webm
    $ ebmldump.py recording.webm Info    # only the Info subtree
'''
import sys
import os
import logging

from ebmlfix import parse
from ebmlfix.core import Container
from ebmlfix.enum import ElementKind, ElementType
from ebmlfix.exceptions import EBMLException
from ebmlfix.registry import id_from_name, lookup_type
from ebmlfix.streams import Stream


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

MAX_PREVIEW = 16


def usage(progname):
    print('usage: %s <ebml file> [element name]' % progname)
    sys.exit(1)


def format_value(element):
    if element.kind == ElementKind.CONTAINER:
        return '%d children' % len(element)

    if element.kind == ElementKind.UNSIGNED_INT:
        return '%d' % element.value

    if element.kind == ElementKind.FLOAT:
        return '%f (%d bytes float)' % (element.value, element.width)

    if lookup_type(element.id) in (ElementType.STRING, ElementType.UTF8):
        return repr(element.raw.decode('utf-8', errors='replace'))

    preview = element.raw[:MAX_PREVIEW].hex()
    return '%s%s (%d bytes)' % (preview, '...' if element.size > MAX_PREVIEW else '', element.size)

def dump(tree: Container, depth=0):
    for _depth, element in tree.walk():
        print(f'{"  " * (depth + _depth)}{element.name} [0x{element.id:x}] @{element.offset}: {format_value(element)}')


def dump_only(tree: Container, element_id):
    '''Dump the subtrees of the elements with the given id.'''
    for _, element in tree.walk():
        if element.id != element_id:
            continue

        print(f'{element.name} [0x{element.id:x}] @{element.offset}: {format_value(element)}')
        if isinstance(element, Container):
            dump(element, depth=1)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]

    element_id = None
    if len(sys.argv) > 2:
        try:
            element_id = id_from_name(sys.argv[2])
        except KeyError as e:
            logger.error(e)
            sys.exit(1)

    with Stream(path) as stream:
        data = stream.read_all()

    try:
        tree = parse(data)
    except EBMLException as e:
        logger.error(f'failed to parse \'{path}\': {e}')
        sys.exit(1)

    if element_id is None:
        dump(tree)
    else:
        dump_only(tree, element_id)
