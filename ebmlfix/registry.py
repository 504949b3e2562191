'''
Known EBML/Matroska element ids.

The ids are stored without the VINT marker bit, see the vint module; the
comment on each line reports the id as it appears in the file.

It's not the full Matroska grammar, only what is needed to navigate a
clip produced by a browser.
'''
from typing import Tuple

from .enum import ElementKind, ElementType


ELEMENTS = {
    # EBML header
    0xa45dfa3: ('EBML', ElementType.MASTER),                  # 1A45DFA3
    0x286: ('EBMLVersion', ElementType.UINT),                 # 4286
    0x2f7: ('EBMLReadVersion', ElementType.UINT),             # 42F7
    0x2f2: ('EBMLMaxIDLength', ElementType.UINT),             # 42F2
    0x2f3: ('EBMLMaxSizeLength', ElementType.UINT),           # 42F3
    0x282: ('DocType', ElementType.STRING),                   # 4282
    0x287: ('DocTypeVersion', ElementType.UINT),              # 4287
    0x285: ('DocTypeReadVersion', ElementType.UINT),          # 4285
    0x6c: ('Void', ElementType.BINARY),                       # EC
    0x3f: ('CRC-32', ElementType.BINARY),                     # BF
    0xb538667: ('SignatureSlot', ElementType.MASTER),         # 1B538667
    0x3e8a: ('SignatureAlgo', ElementType.UINT),              # 7E8A
    0x3e9a: ('SignatureHash', ElementType.UINT),              # 7E9A
    0x3ea5: ('SignaturePublicKey', ElementType.BINARY),       # 7EA5
    0x3eb5: ('Signature', ElementType.BINARY),                # 7EB5
    0x3e5b: ('SignatureElements', ElementType.MASTER),        # 7E5B
    0x3e7b: ('SignatureElementList', ElementType.MASTER),     # 7E7B
    0x2532: ('SignedElement', ElementType.BINARY),            # 6532

    # Segment
    0x8538067: ('Segment', ElementType.MASTER),               # 18538067
    0x14d9b74: ('SeekHead', ElementType.MASTER),              # 114D9B74
    0xdbb: ('Seek', ElementType.MASTER),                      # 4DBB
    0x13ab: ('SeekID', ElementType.BINARY),                   # 53AB
    0x13ac: ('SeekPosition', ElementType.UINT),               # 53AC

    # Info
    0x549a966: ('Info', ElementType.MASTER),                  # 1549A966
    0x33a4: ('SegmentUID', ElementType.BINARY),               # 73A4
    0x3384: ('SegmentFilename', ElementType.UTF8),            # 7384
    0x1cb923: ('PrevUID', ElementType.BINARY),                # 3CB923
    0x1c83ab: ('PrevFilename', ElementType.UTF8),             # 3C83AB
    0x1eb923: ('NextUID', ElementType.BINARY),                # 3EB923
    0x1e83bb: ('NextFilename', ElementType.UTF8),             # 3E83BB
    0x444: ('SegmentFamily', ElementType.BINARY),             # 4444
    0x2924: ('ChapterTranslate', ElementType.MASTER),         # 6924
    0x29fc: ('ChapterTranslateEditionUID', ElementType.UINT),  # 69FC
    0x29bf: ('ChapterTranslateCodec', ElementType.UINT),      # 69BF
    0x29a5: ('ChapterTranslateID', ElementType.BINARY),       # 69A5
    0xad7b1: ('TimecodeScale', ElementType.UINT),             # 2AD7B1
    0x489: ('Duration', ElementType.FLOAT),                   # 4489
    0x461: ('DateUTC', ElementType.DATE),                     # 4461
    0x3ba9: ('Title', ElementType.UTF8),                      # 7BA9
    0xd80: ('MuxingApp', ElementType.UTF8),                   # 4D80
    0x1741: ('WritingApp', ElementType.UTF8),                 # 5741

    # Cluster
    0xf43b675: ('Cluster', ElementType.MASTER),               # 1F43B675
    0x67: ('Timecode', ElementType.UINT),                     # E7
    0x1854: ('SilentTracks', ElementType.MASTER),             # 5854
    0x18d7: ('SilentTrackNumber', ElementType.UINT),          # 58D7
    0x27: ('Position', ElementType.UINT),                     # A7
    0x2b: ('PrevSize', ElementType.UINT),                     # AB
    0x23: ('SimpleBlock', ElementType.BINARY),                # A3
    0x20: ('BlockGroup', ElementType.MASTER),                 # A0
    0x21: ('Block', ElementType.BINARY),                      # A1
    0x22: ('BlockVirtual', ElementType.BINARY),               # A2
    0x35a1: ('BlockAdditions', ElementType.MASTER),           # 75A1
    0x26: ('BlockMore', ElementType.MASTER),                  # A6
    0x6e: ('BlockAddID', ElementType.UINT),                   # EE
    0x25: ('BlockAdditional', ElementType.BINARY),            # A5
    0x1b: ('BlockDuration', ElementType.UINT),                # 9B
    0x7a: ('ReferencePriority', ElementType.UINT),            # FA
    0x7b: ('ReferenceBlock', ElementType.INT),                # FB
    0x7d: ('ReferenceVirtual', ElementType.INT),              # FD
    0x24: ('CodecState', ElementType.BINARY),                 # A4
    0x35a2: ('DiscardPadding', ElementType.INT),              # 75A2
    0xe: ('Slices', ElementType.MASTER),                      # 8E
    0x68: ('TimeSlice', ElementType.MASTER),                  # E8
    0x4c: ('LaceNumber', ElementType.UINT),                   # CC

    # Tracks
    0x654ae6b: ('Tracks', ElementType.MASTER),                # 1654AE6B
    0x2e: ('TrackEntry', ElementType.MASTER),                 # AE
    0x57: ('TrackNumber', ElementType.UINT),                  # D7
    0x33c5: ('TrackUID', ElementType.UINT),                   # 73C5
    0x3: ('TrackType', ElementType.UINT),                     # 83
    0x39: ('FlagEnabled', ElementType.UINT),                  # B9
    0x8: ('FlagDefault', ElementType.UINT),                   # 88
    0x15aa: ('FlagForced', ElementType.UINT),                 # 55AA
    0x1c: ('FlagLacing', ElementType.UINT),                   # 9C
    0x2de7: ('MinCache', ElementType.UINT),                   # 6DE7
    0x2df8: ('MaxCache', ElementType.UINT),                   # 6DF8
    0x3e383: ('DefaultDuration', ElementType.UINT),           # 23E383
    0x34e7a: ('DefaultDecodedFieldDuration', ElementType.UINT),  # 234E7A
    0x3314f: ('TrackTimecodeScale', ElementType.FLOAT),       # 23314F
    0x137f: ('TrackOffset', ElementType.INT),                 # 537F
    0x15ee: ('MaxBlockAdditionID', ElementType.UINT),         # 55EE
    0x136e: ('Name', ElementType.UTF8),                       # 536E
    0x2b59c: ('Language', ElementType.STRING),                # 22B59C
    0x6: ('CodecID', ElementType.STRING),                     # 86
    0x23a2: ('CodecPrivate', ElementType.BINARY),             # 63A2
    0x58688: ('CodecName', ElementType.UTF8),                 # 258688
    0x3446: ('AttachmentLink', ElementType.UINT),             # 7446
    0x2a: ('CodecDecodeAll', ElementType.UINT),               # AA
    0x2fab: ('TrackOverlay', ElementType.UINT),               # 6FAB
    0x16aa: ('CodecDelay', ElementType.UINT),                 # 56AA
    0x16bb: ('SeekPreRoll', ElementType.UINT),                # 56BB
    0x2624: ('TrackTranslate', ElementType.MASTER),           # 6624
    0x26fc: ('TrackTranslateEditionUID', ElementType.UINT),   # 66FC
    0x26bf: ('TrackTranslateCodec', ElementType.UINT),        # 66BF
    0x26a5: ('TrackTranslateTrackID', ElementType.BINARY),    # 66A5

    # Video
    0x60: ('Video', ElementType.MASTER),                      # E0
    0x1a: ('FlagInterlaced', ElementType.UINT),               # 9A
    0x13b8: ('StereoMode', ElementType.UINT),                 # 53B8
    0x13c0: ('AlphaMode', ElementType.UINT),                  # 53C0
    0x30: ('PixelWidth', ElementType.UINT),                   # B0
    0x3a: ('PixelHeight', ElementType.UINT),                  # BA
    0x14aa: ('PixelCropBottom', ElementType.UINT),            # 54AA
    0x14bb: ('PixelCropTop', ElementType.UINT),               # 54BB
    0x14cc: ('PixelCropLeft', ElementType.UINT),              # 54CC
    0x14dd: ('PixelCropRight', ElementType.UINT),             # 54DD
    0x14b0: ('DisplayWidth', ElementType.UINT),               # 54B0
    0x14ba: ('DisplayHeight', ElementType.UINT),              # 54BA
    0x14b2: ('DisplayUnit', ElementType.UINT),                # 54B2
    0x14b3: ('AspectRatioType', ElementType.UINT),            # 54B3
    0xeb524: ('ColourSpace', ElementType.BINARY),             # 2EB524
    0x383e3: ('FrameRate', ElementType.FLOAT),                # 2383E3

    # Audio
    0x61: ('Audio', ElementType.MASTER),                      # E1
    0x35: ('SamplingFrequency', ElementType.FLOAT),           # B5
    0x38b5: ('OutputSamplingFrequency', ElementType.FLOAT),   # 78B5
    0x1f: ('Channels', ElementType.UINT),                     # 9F
    0x3d7b: ('ChannelPositions', ElementType.BINARY),         # 7D7B
    0x2264: ('BitDepth', ElementType.UINT),                   # 6264

    # ContentEncodings
    0x2d80: ('ContentEncodings', ElementType.MASTER),         # 6D80
    0x2240: ('ContentEncoding', ElementType.MASTER),          # 6240
    0x1031: ('ContentEncodingOrder', ElementType.UINT),       # 5031
    0x1032: ('ContentEncodingScope', ElementType.UINT),       # 5032
    0x1033: ('ContentEncodingType', ElementType.UINT),        # 5033
    0x1034: ('ContentCompression', ElementType.MASTER),       # 5034
    0x254: ('ContentCompAlgo', ElementType.UINT),             # 4254
    0x255: ('ContentCompSettings', ElementType.BINARY),       # 4255
    0x1035: ('ContentEncryption', ElementType.MASTER),        # 5035

    # Cues
    0xc53bb6b: ('Cues', ElementType.MASTER),                  # 1C53BB6B
    0x3b: ('CuePoint', ElementType.MASTER),                   # BB
    0x33: ('CueTime', ElementType.UINT),                      # B3
    0x37: ('CueTrackPositions', ElementType.MASTER),          # B7
    0x77: ('CueTrack', ElementType.UINT),                     # F7
    0x71: ('CueClusterPosition', ElementType.UINT),           # F1
    0x70: ('CueRelativePosition', ElementType.UINT),          # F0
    0x32: ('CueDuration', ElementType.UINT),                  # B2
    0x1378: ('CueBlockNumber', ElementType.UINT),             # 5378
    0x6a: ('CueCodecState', ElementType.UINT),                # EA
    0x5b: ('CueReference', ElementType.MASTER),               # DB
    0x16: ('CueRefTime', ElementType.UINT),                   # 96

    # Attachments
    0x941a469: ('Attachments', ElementType.MASTER),           # 1941A469
    0x21a7: ('AttachedFile', ElementType.MASTER),             # 61A7
    0x67e: ('FileDescription', ElementType.UTF8),             # 467E
    0x66e: ('FileName', ElementType.UTF8),                    # 466E
    0x660: ('FileMimeType', ElementType.STRING),              # 4660
    0x65c: ('FileData', ElementType.BINARY),                  # 465C
    0x6ae: ('FileUID', ElementType.UINT),                     # 46AE

    # Chapters
    0x43a770: ('Chapters', ElementType.MASTER),               # 1043A770
    0x5b9: ('EditionEntry', ElementType.MASTER),              # 45B9
    0x5bc: ('EditionUID', ElementType.UINT),                  # 45BC
    0x5bd: ('EditionFlagHidden', ElementType.UINT),           # 45BD
    0x5db: ('EditionFlagDefault', ElementType.UINT),          # 45DB
    0x5dd: ('EditionFlagOrdered', ElementType.UINT),          # 45DD
    0x36: ('ChapterAtom', ElementType.MASTER),                # B6
    0x33c4: ('ChapterUID', ElementType.UINT),                 # 73C4
    0x1654: ('ChapterStringUID', ElementType.UTF8),           # 5654
    0x11: ('ChapterTimeStart', ElementType.UINT),             # 91
    0x12: ('ChapterTimeEnd', ElementType.UINT),               # 92
    0x18: ('ChapterFlagHidden', ElementType.UINT),            # 98
    0x598: ('ChapterFlagEnabled', ElementType.UINT),          # 4598
    0x0: ('ChapterDisplay', ElementType.MASTER),              # 80
    0x5: ('ChapString', ElementType.UTF8),                    # 85
    0x37c: ('ChapLanguage', ElementType.STRING),              # 437C
    0x37e: ('ChapCountry', ElementType.STRING),               # 437E

    # Tags
    0x254c367: ('Tags', ElementType.MASTER),                  # 1254C367
    0x3373: ('Tag', ElementType.MASTER),                      # 7373
    0x23c0: ('Targets', ElementType.MASTER),                  # 63C0
    0x28ca: ('TargetTypeValue', ElementType.UINT),            # 68CA
    0x23ca: ('TargetType', ElementType.STRING),               # 63CA
    0x23c5: ('TagTrackUID', ElementType.UINT),                # 63C5
    0x23c9: ('TagEditionUID', ElementType.UINT),              # 63C9
    0x23c4: ('TagChapterUID', ElementType.UINT),              # 63C4
    0x23c6: ('TagAttachmentUID', ElementType.UINT),           # 63C6
    0x27c8: ('SimpleTag', ElementType.MASTER),                # 67C8
    0x5a3: ('TagName', ElementType.UTF8),                     # 45A3
    0x47a: ('TagLanguage', ElementType.STRING),               # 447A
    0x484: ('TagDefault', ElementType.UINT),                  # 4484
    0x487: ('TagString', ElementType.UTF8),                   # 4487
    0x485: ('TagBinary', ElementType.BINARY),                 # 4485
}

UNKNOWN_NAME = 'Unknown'

SEGMENT_ID        = 0x8538067
INFO_ID           = 0x549a966
TIMECODE_SCALE_ID = 0xad7b1
DURATION_ID       = 0x489


def lookup(element_id) -> Tuple[str, ElementKind]:
    '''Returns the couple (name, kind) for the given id.'''
    name, _type = ELEMENTS.get(element_id, (UNKNOWN_NAME, ElementType.BINARY))

    return name, _type.kind


def lookup_type(element_id) -> ElementType:
    return ELEMENTS.get(element_id, (UNKNOWN_NAME, ElementType.BINARY))[1]


def id_from_name(name) -> int:
    for element_id, (element_name, _) in ELEMENTS.items():
        if element_name == name:
            return element_id

    raise KeyError(f'no element named \'{name}\'')
