import struct

import pytest


EBML = b'\x1a\x45\xdf\xa3'
DOC_TYPE = b'\x42\x82'
SEGMENT = b'\x18\x53\x80\x67'
INFO = b'\x15\x49\xa9\x66'
TIMECODE_SCALE = b'\x2a\xd7\xb1'
DURATION = b'\x44\x89'
MUXING_APP = b'\x4d\x80'
TRACKS = b'\x16\x54\xae\x6b'
TRACK_ENTRY = b'\xae'
TRACK_NUMBER = b'\xd7'
CODEC_ID = b'\x86'
CLUSTER = b'\x1f\x43\xb6\x75'
TIMECODE = b'\xe7'
SIMPLE_BLOCK = b'\xa3'

# the size used by MediaRecorder for the Segment
UNKNOWN_SIZE = b'\x01\xff\xff\xff\xff\xff\xff\xff'


def element(element_id, payload, size=None):
    if size is None:
        length = len(payload)
        size = bytes([0x80 | length]) if length < 0x7f else (0x4000 | length).to_bytes(2, 'big')

    return element_id + size + payload


def build_webm(duration=None, duration_width=8, timecode_scale=1000000, segment_size=None,
               with_timecode_scale=True, with_info=True, with_segment=True, muxing_app=b'Chrome'):
    '''Minimal audio clip like the one produced by a browser.'''
    header = element(EBML, element(DOC_TYPE, b'webm'))

    info = b''
    if with_timecode_scale:
        info += element(TIMECODE_SCALE, timecode_scale.to_bytes(3, 'big'))
    info += element(MUXING_APP, muxing_app)
    if duration is not None:
        info += element(DURATION, struct.pack('>d' if duration_width == 8 else '>f', duration))

    tracks = element(TRACKS, element(TRACK_ENTRY, element(TRACK_NUMBER, b'\x01') + element(CODEC_ID, b'A_OPUS')))
    cluster = element(CLUSTER, element(TIMECODE, b'\x00') + element(SIMPLE_BLOCK, b'\x81\x00\x00\x80'))

    segment = (element(INFO, info) if with_info else b'') + tracks + cluster

    if not with_segment:
        return header + segment

    return header + element(SEGMENT, segment, size=segment_size)


@pytest.fixture
def make_webm():
    return build_webm


@pytest.fixture
def webm():
    '''Clip without Duration'''
    return build_webm()


@pytest.fixture
def webm_with_duration():
    return build_webm(duration=1234.0)
