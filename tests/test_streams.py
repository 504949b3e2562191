import pytest

from ebmlfix.streams import Stream


def test_bytes_stream_read_all():
    data = b'\x01\x02\x03\x04\x05'

    stream = Stream(data)

    assert stream.read(1) == b'\x01'
    assert stream.read(1) == b'\x02'
    assert stream.read_all() == b'\x03\x04\x05'
    assert stream.tell() == 5


def test_file_stream(tmp_path):
    path = tmp_path / 'auaua'

    with Stream(path, flags='w') as stream:
        stream.write(b'\x01\x02\x03\x04\x05')

    with Stream(str(path)) as stream:
        assert stream.read(1) == b'\x01'
        assert stream.read_all() == b'\x02\x03\x04\x05'


def test_allocated_stream():
    stream = Stream(4)

    stream.seek(2).write(b'\xaa')

    assert stream.getvalue() == b'\x00\x00\xaa\x00'


def test_wrong_object():
    with pytest.raises(ValueError):
        Stream(1.5)

    with pytest.raises(ValueError):
        Stream(b'').seek('miao')
