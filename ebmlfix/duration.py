'''
# Duration fixing

The MediaRecorder API of the browsers writes the WebM header before knowing
how long the recording will be, so the Duration in Segment/Info is either
missing or zero and players can't seek.

The Duration is expressed in ticks and a tick lasts TimecodeScale
nanoseconds: since we write a value in milliseconds the TimecodeScale is
always set to 1ms (1000000ns) together with it.
'''
import logging
from typing import Optional

from .core import Container
from .fields import DEFAULT_FLOAT_WIDTH, FloatElement
from .registry import (
    DURATION_ID,
    INFO_ID,
    SEGMENT_ID,
    TIMECODE_SCALE_ID,
)


logger = logging.getLogger(__name__)

# nanoseconds in a millisecond
DEFAULT_TIMECODE_SCALE = 1000000


def default_logger(message):
    logger.warning(message)


def find_child(container: Container, element_id):
    return container.find(element_id)


def find_info(tree: Container) -> Optional[Container]:
    segment = find_child(tree, SEGMENT_ID)
    if segment is None:
        return None

    return find_child(segment, INFO_ID)


def get_duration(tree: Container) -> Optional[float]:
    '''Returns the Duration (in ticks) if present.'''
    info = find_info(tree)
    if info is None:
        return None

    duration = find_child(info, DURATION_ID)

    return duration.value if duration is not None else None


def fix_duration(tree: Container, duration_ms, logger=None) -> bool:
    '''Set the Duration of the tree if it's missing or not positive.

    It returns True when the tree has been modified, in that case the raw of
    the root is already up to date.'''
    log = logger if logger is not None else default_logger

    segment = find_child(tree, SEGMENT_ID)
    if segment is None:
        log('[fix_duration] Segment section is missing')
        return False

    info = find_child(segment, INFO_ID)
    if info is None:
        log('[fix_duration] Info section is missing')
        return False

    timecode_scale = find_child(info, TIMECODE_SCALE_ID)
    if timecode_scale is None:
        log('[fix_duration] TimecodeScale is missing')
        return False

    duration = find_child(info, DURATION_ID)
    if duration is not None:
        if duration.value > 0:
            log('[fix_duration] Duration is already present: %s' % duration.value)
            return False

        log('[fix_duration] Duration is %s, setting it to %s' % (duration.value, duration_ms))
        duration.value = float(duration_ms)
    else:
        log('[fix_duration] Duration is missing, adding it with value %s' % duration_ms)
        duration = FloatElement(DURATION_ID, value=float(duration_ms), width=DEFAULT_FLOAT_WIDTH)
        info.append(DURATION_ID, duration)

    # the Duration is in milliseconds so a tick must be 1ms
    timecode_scale.value = DEFAULT_TIMECODE_SCALE

    info.refresh()
    segment.refresh()
    tree.refresh()

    return True
