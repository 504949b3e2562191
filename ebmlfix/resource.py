'''
Entry point to fix a recorded clip: the clip is read in memory, parsed,
patched and serialized again.

It's a best-effort repair: whatever goes wrong the original resource is
returned so that the caller has always something usable.
'''
import asyncio
import logging
import mimetypes

from .core import parse, serialize
from .duration import fix_duration
from .exceptions import EBMLException
from .streams import Stream


logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = 'video/webm'


class Blob(object):
    '''Binary resource with a media type, either in memory or backed by a file.'''

    def __init__(self, data=b'', media_type=DEFAULT_MEDIA_TYPE, path=None):
        self._data = None if path is not None else bytes(data)
        self.path = path
        self.media_type = media_type

    def __repr__(self):
        where = self.path if self.path is not None else '%d bytes' % len(self._data)
        return '<%s(%s, %s)>' % (self.__class__.__name__, self.media_type, where)

    @classmethod
    def from_path(cls, path, media_type=None):
        if media_type is None:
            media_type = mimetypes.guess_type(str(path))[0] or DEFAULT_MEDIA_TYPE

        return cls(media_type=media_type, path=path)

    def read(self) -> bytes:
        if self._data is not None:
            return self._data

        with Stream(self.path) as stream:
            return stream.read_all()

    async def aread(self) -> bytes:
        loop = asyncio.get_running_loop()

        return await loop.run_in_executor(None, self.read)


def resolve_logger(option):
    '''False means silence, a callable receives the messages, anything else
    uses the logging of this module at WARNING level, so that the messages
    are shown also when the logging is not configured.'''
    if option is False:
        return lambda message: None

    if callable(option):
        return option

    return logger.warning


def fix_bytes(data, duration_ms, logger=None) -> bytes:
    '''Returns the fixed bytes or the very same data passed as argument if
    there is nothing to fix or the data can't be parsed.'''
    log = resolve_logger(logger)

    try:
        tree = parse(data)
    except (EBMLException, ValueError, IndexError, RecursionError) as e:
        _log_failure('parse', e)
        return data

    try:
        if not fix_duration(tree, duration_ms, logger=log):
            return data

        return serialize(tree)
    except (EBMLException, ValueError, OverflowError) as e:
        _log_failure('serialize', e)
        return data


def _log_failure(step, exc):
    logger.debug('failed to %s: %s', step, exc, exc_info=True)


def _fix_resource(resource, data, duration_ms, logger):
    fixed = fix_bytes(data, duration_ms, logger=logger)

    if fixed is data:
        return resource

    return Blob(fixed, media_type=resource.media_type)


async def _fix_binary_resource(resource, duration_ms, logger):
    try:
        data = await resource.aread()
    except OSError as e:
        _log_failure('read', e)
        return resource

    return _fix_resource(resource, data, duration_ms, logger)


def fix_binary_resource(resource, duration_ms, callback=None, logger=None):
    '''Fix the Duration of the clip contained in the resource (a Blob).

    With a callback the work is done immediately, the callback is called with
    the resulting Blob that is also returned; without it a coroutine is
    returned that needs to be awaited.

    The resulting Blob is the same object passed as argument if nothing
    changed, otherwise a new one with the same media type.'''
    if callback is None:
        return _fix_binary_resource(resource, duration_ms, logger)

    try:
        data = resource.read()
    except OSError as e:
        _log_failure('read', e)
        result = resource
    else:
        result = _fix_resource(resource, data, duration_ms, logger)

    callback(result)

    return result
