import struct

from ebmlfix.core import parse, serialize
from ebmlfix.duration import DEFAULT_TIMECODE_SCALE, fix_duration, get_duration
from ebmlfix.fields import FloatElement
from ebmlfix.registry import DURATION_ID, INFO_ID, SEGMENT_ID, TIMECODE_SCALE_ID


def get_info(tree):
    return tree.find(SEGMENT_ID).find(INFO_ID)


def test_insert_duration(webm):
    tree = parse(webm)
    messages = []

    assert fix_duration(tree, 5000, logger=messages.append)

    info = get_info(tree)
    duration = info.find(DURATION_ID)

    assert isinstance(duration, FloatElement)
    assert duration.width == 8
    assert duration.value == 5000.0
    assert duration.father is info
    # appended at the end
    assert [child.name for _, child in info] == ['TimecodeScale', 'MuxingApp', 'Duration']
    assert info.find(TIMECODE_SCALE_ID).value == DEFAULT_TIMECODE_SCALE
    assert len(messages) == 1

    # the raw of the root is already up to date
    assert not tree._raw_stale
    assert len(tree.raw) == len(webm) + 11


def test_zero_duration_is_overwritten(make_webm):
    data = make_webm(duration=0.0, duration_width=4)
    tree = parse(data)

    assert fix_duration(tree, 5000, logger=lambda _: None)

    duration = get_info(tree).find(DURATION_ID)

    assert duration.width == 4
    assert duration.raw == struct.pack('>f', 5000.0)
    assert len(serialize(tree)) == len(data)


def test_negative_duration_is_overwritten(make_webm):
    tree = parse(make_webm(duration=-1.0))

    assert fix_duration(tree, 300, logger=lambda _: None)
    assert get_duration(tree) == 300.0


def test_duration_already_present(webm_with_duration):
    tree = parse(webm_with_duration)
    messages = []

    assert not fix_duration(tree, 5000, logger=messages.append)
    assert 'already present' in messages[0]
    assert get_duration(tree) == 1234.0
    assert not tree._raw_stale
    assert tree.raw == webm_with_duration


def test_timecode_scale_is_forced(make_webm):
    tree = parse(make_webm(timecode_scale=500000))

    assert fix_duration(tree, 5000, logger=lambda _: None)
    assert get_info(tree).find(TIMECODE_SCALE_ID).value == 1000000


def test_missing_sections(make_webm):
    cases = [
        (make_webm(with_segment=False), 'Segment'),
        (make_webm(with_info=False), 'Info'),
        (make_webm(with_timecode_scale=False), 'TimecodeScale'),
    ]

    for data, name in cases:
        tree = parse(data)
        messages = []

        assert not fix_duration(tree, 5000, logger=messages.append)
        assert name in messages[0]
        assert tree.raw == data


def test_get_duration(webm):
    tree = parse(webm)

    assert get_duration(tree) is None

    fix_duration(tree, 42, logger=lambda _: None)

    assert get_duration(tree) == 42.0
    assert get_duration(parse(b'')) is None
