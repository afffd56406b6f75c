'''
# SoundFont 2

Sample-bank format for wavetable synthesis built on top of RIFF: the root
chunk has type "sfbk" and contains three lists

    RIFF 'sfbk'
      LIST 'INFO'   metadata (version, name, ...)
      LIST 'sdta'   the sample data ('smpl' chunk)
      LIST 'pdta'   presets, instruments and samples headers
        'phdr' 'pbag' 'pmod' 'pgen'   presets, their zones, modulators and generators
        'inst' 'ibag' 'imod' 'igen'   instruments, their zones, modulators and generators
        'shdr'                        samples

every chunk of 'pdta' is an array of fixed-size records terminated by a
sentinel record (named "EOP", "EOI", "EOS" for the headers).

The specification is at <https://freepats.zenvoid.org/sf2/sfspec24.pdf>.

    with SoundFont(path) as sf2:
        print(sf2.info().soundfont_name())
        for preset in sf2.preset_headers():
            print(preset.bank_preset(), preset.preset_name())
'''
import logging
from typing import List, Optional, Tuple

from ..exceptions import InvalidRootChunk, MalformedVersionChunk
from ..riff import RiffChunk
from ..streams import Buffer
from .records import (
    PresetHeader,
    Instrument,
    Sample,
    Zone,
    Generator,
    Modulator,
    Version,
)
from .utils import (
    cast_records,
    require_subchunk,
    str_from_zstr,
)


logger = logging.getLogger(__name__)


class Info(object):
    '''Metadata of the soundfont, from the "INFO" list.

    The required ones raise MissingChunk when absent, the optional ones
    return None.'''

    def __init__(self, chunk_info: RiffChunk):
        self.chunk_info = chunk_info

    def _read_zstr_chunk(self, chunk_id, required=False) -> Optional[str]:
        chunk = self.chunk_info.subchunk(chunk_id) if not required else require_subchunk(self.chunk_info, chunk_id)

        if chunk is None:
            return None

        return str_from_zstr(chunk.chunk_data())

    def _read_ver_chunk(self, chunk_id, required=False) -> Optional[Tuple[int, int]]:
        chunk = self.chunk_info.subchunk(chunk_id) if not required else require_subchunk(self.chunk_info, chunk_id)

        if chunk is None:
            return None

        data = chunk.chunk_data()
        if len(data) != Version.get_size():
            raise MalformedVersionChunk(chain=[chunk_id])

        return Version(data).as_tuple()

    def format_version(self) -> Tuple[int, int]:
        return self._read_ver_chunk('ifil', required=True)

    def sound_engine(self) -> str:
        return self._read_zstr_chunk('isng', required=True)

    def soundfont_name(self) -> str:
        return self._read_zstr_chunk('INAM', required=True)

    def rom_name(self) -> Optional[str]:
        return self._read_zstr_chunk('irom')

    def rom_version(self) -> Optional[Tuple[int, int]]:
        return self._read_ver_chunk('iver')

    def date(self) -> Optional[str]:
        return self._read_zstr_chunk('ICRD')

    def author(self) -> Optional[str]:
        return self._read_zstr_chunk('IENG')

    def product(self) -> Optional[str]:
        return self._read_zstr_chunk('IPRD')

    def copyright(self) -> Optional[str]:
        return self._read_zstr_chunk('ICOP')

    def comment(self) -> Optional[str]:
        return self._read_zstr_chunk('ICMT')

    def soundfont_tools(self) -> Optional[List[str]]:
        '''The tools used to create and edit the file, separated by colons.'''
        tools = self._read_zstr_chunk('ISFT')

        if tools is None:
            return None

        return [_ for _ in tools.split(':') if _]


class SoundFont(object):
    '''Entry point of the format: it can be built from the root chunk
    already parsed or from whatever Buffer accepts.'''

    def __init__(self, obj):
        self.buffer = None

        if isinstance(obj, RiffChunk):
            self.root_chunk = obj
        elif isinstance(obj, Buffer):
            self.root_chunk = RiffChunk.new(obj)
        else:
            self.buffer = Buffer(obj)
            logger.debug('parsing soundfont from %r' % self.buffer)
            self.root_chunk = RiffChunk.new(self.buffer)

        if self.root_chunk.chunk_id() != 'sfbk':
            logger.debug('root chunk is \'%s\'' % self.root_chunk.chunk_id())
            self.close()
            raise InvalidRootChunk()

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.root_chunk!r})>'

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        '''Close the buffer, if it was opened by us. Nothing obtained from
        this instance must be used afterwards.'''
        if self.buffer is not None:
            self.root_chunk = None
            self.buffer.close()
            self.buffer = None

    def _pdta_records(self, chunk_id, record_cls):
        chunk_pdta = require_subchunk(self.root_chunk, 'pdta')
        chunk = require_subchunk(chunk_pdta, chunk_id)

        return cast_records(chunk.chunk_data(), record_cls, chunk_id)

    def info(self) -> Info:
        return Info(require_subchunk(self.root_chunk, 'INFO'))

    def preset_headers(self):
        return self._pdta_records('phdr', PresetHeader)

    def preset_zones(self):
        return self._pdta_records('pbag', Zone)

    def preset_generators(self):
        return self._pdta_records('pgen', Generator)

    def preset_modulators(self):
        return self._pdta_records('pmod', Modulator)

    def instrument_headers(self):
        return self._pdta_records('inst', Instrument)

    def instrument_zones(self):
        return self._pdta_records('ibag', Zone)

    def instrument_generators(self):
        return self._pdta_records('igen', Generator)

    def instrument_modulators(self):
        return self._pdta_records('imod', Modulator)

    def sample_headers(self):
        return self._pdta_records('shdr', Sample)

    def sample_data(self) -> memoryview:
        '''The raw "smpl" chunk: 16 bits samples, not interpreted.'''
        chunk_sdta = require_subchunk(self.root_chunk, 'sdta')

        return require_subchunk(chunk_sdta, 'smpl').chunk_data()
