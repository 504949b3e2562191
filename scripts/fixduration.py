#!/usr/bin/env python3
'''
Fix the Duration of a WebM clip recorded by a browser.

    $ fixduration.py recording.webm 5000             # fix in place
    $ fixduration.py recording.webm 5000 fixed.webm  # write to a new file

The duration is in milliseconds.
'''
import sys
import os
import logging

from ebmlfix import Blob, fix_binary_resource
from ebmlfix.streams import Stream


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <webm file> <duration in ms> [output file]' % progname)
    sys.exit(1)


def save(blob, path):
    with Stream(path, flags='w') as stream:
        stream.write(blob.read())


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    path = sys.argv[1]
    output = sys.argv[3] if len(sys.argv) > 3 else path

    try:
        duration_ms = float(sys.argv[2])
    except ValueError:
        usage(sys.argv[0])

    blob = Blob.from_path(path)

    fixed = fix_binary_resource(blob, duration_ms, callback=lambda _: None, logger=logger.info)

    if fixed is blob:
        print(f'nothing changed for \'{path}\'')
        if output != path:
            save(blob, output)
        sys.exit(0)

    save(fixed, output)
    print(f'duration of \'{path}\' set to {duration_ms}ms, saved to \'{output}\'')
