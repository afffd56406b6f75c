import pytest

from sfstruct.exceptions import (
    MissingChunk,
    MalformedZstr,
    MalformedVersionChunk,
)
from sfstruct.sf2 import SoundFont

from builders import chunk, list_, soundfont, info, version


def get_info(*subchunks):
    return SoundFont(soundfont(list_(b'INFO', *subchunks))).info()


def test_info_complete():
    sf2_info = SoundFont(soundfont(info(
        chunk(b'irom', b'1MGM\x00'),
        chunk(b'iver', version(1, 0)),
        chunk(b'ICRD', b'June 1, 2024\x00'),
        chunk(b'IENG', b'Somebody\x00'),
        chunk(b'IPRD', b'SBAWE32\x00'),
        chunk(b'ICOP', b'Public domain\x00'),
        chunk(b'ICMT', b'Just a test\x00'),
        chunk(b'ISFT', b'SFEDT v1.10:::Polyphone:Polyphone\x00'),
        name=b'General', major=2, minor=4, engine=b'E-mu 10K1',
    ))).info()

    assert sf2_info.format_version() == (2, 4)
    assert sf2_info.sound_engine() == 'E-mu 10K1'
    assert sf2_info.soundfont_name() == 'General'
    assert sf2_info.rom_name() == '1MGM'
    assert sf2_info.rom_version() == (1, 0)
    assert sf2_info.date() == 'June 1, 2024'
    assert sf2_info.author() == 'Somebody'
    assert sf2_info.product() == 'SBAWE32'
    assert sf2_info.copyright() == 'Public domain'
    assert sf2_info.comment() == 'Just a test'
    # empty segments dropped, duplicates kept
    assert sf2_info.soundfont_tools() == ['SFEDT v1.10', 'Polyphone', 'Polyphone']


def test_info_optional_missing():
    sf2_info = SoundFont(soundfont(info())).info()

    assert sf2_info.rom_name() is None
    assert sf2_info.rom_version() is None
    assert sf2_info.date() is None
    assert sf2_info.author() is None
    assert sf2_info.product() is None
    assert sf2_info.copyright() is None
    assert sf2_info.comment() is None
    assert sf2_info.soundfont_tools() is None


@pytest.mark.parametrize('method, chunk_id', [
    ('format_version', 'ifil'),
    ('sound_engine', 'isng'),
    ('soundfont_name', 'INAM'),
])
def test_info_required_missing(method, chunk_id):
    sf2_info = get_info()

    with pytest.raises(MissingChunk) as e:
        getattr(sf2_info, method)()

    assert e.value.chunk_id == chunk_id
    assert str(e.value) == f"Missing '{chunk_id}' chunk"


def test_info_zstr_garbage_after_terminator():
    assert get_info(chunk(b'INAM', b'abc\x00xyz')).soundfont_name() == 'abc'


def test_info_zstr_without_terminator():
    with pytest.raises(MalformedZstr):
        get_info(chunk(b'INAM', b'abcd')).soundfont_name()


def test_info_zstr_not_utf8():
    with pytest.raises(MalformedZstr):
        get_info(chunk(b'ICMT', b'\xff\xfe\x00')).comment()


def test_info_version_wrong_size():
    sf2_info = get_info(chunk(b'ifil', b'\x02\x00\x01\x00\x00\x00'), chunk(b'iver', b'\x01\x00'))

    with pytest.raises(MalformedVersionChunk):
        sf2_info.format_version()

    with pytest.raises(MalformedVersionChunk):
        sf2_info.rom_version()


def test_info_failure_is_local():
    """A broken metadata doesn't prevent reading the others."""
    sf2_info = get_info(chunk(b'INAM', b'abcd'), chunk(b'isng', b'EMU8000\x00'))

    with pytest.raises(MalformedZstr):
        sf2_info.soundfont_name()

    assert sf2_info.sound_engine() == 'EMU8000'
