'''
Records of the "pdta" chunk (and the version of the "INFO" chunk).

The fields are named as in the SoundFont 2.04 specification, section 7; all
of them are little endian and there is no padding between them.
'''
import struct

from ..core import Record
from .. import fields
from .enum import SampleType, GeneratorOperator, ModulatorSourceType
from .utils import str_from_fixedstr


# SFModulator, from the most significant bit
MODULATOR_LAYOUT = [
    ('type', 6),
    ('polarity', 1),
    ('direction', 1),
    ('cc', 1),
    ('index', 7),
]


class HeaderRecord(Record):
    '''Records starting with a 20 bytes name: the terminator of their array has a reserved one.'''
    TERMINATOR_NAME = None

    def get_name_field(self):
        return getattr(self, self._meta.fields[0])


class PresetHeader(HeaderRecord):
    '''sfPresetHeader: 38 bytes'''
    TERMINATOR_NAME = b'EOP'

    achPresetName = fields.FixedLengthString(20)
    wPreset       = fields.StructField('H')
    wBank         = fields.StructField('H')
    wPresetBagNdx = fields.StructField('H')
    dwLibrary     = fields.StructField('I')
    dwGenre       = fields.StructField('I')
    dwMorphology  = fields.StructField('I')

    def preset_name(self) -> str:
        return str_from_fixedstr(self.achPresetName.value)

    def bank_preset(self):
        return (self.wBank.value, self.wPreset.value)

    def bank(self) -> int:
        return self.wBank.value

    def preset(self) -> int:
        return self.wPreset.value


class Instrument(HeaderRecord):
    '''sfInst: 22 bytes'''
    TERMINATOR_NAME = b'EOI'

    achInstName = fields.FixedLengthString(20)
    wInstBagNdx = fields.StructField('H')

    def instrument_name(self) -> str:
        return str_from_fixedstr(self.achInstName.value)


class Sample(HeaderRecord):
    '''sfSample: 46 bytes'''
    TERMINATOR_NAME = b'EOS'

    achSampleName     = fields.FixedLengthString(20)
    dwStart           = fields.StructField('I')
    dwEnd             = fields.StructField('I')
    dwStartloop       = fields.StructField('I')
    dwEndloop         = fields.StructField('I')
    dwSampleRate      = fields.StructField('I')
    byOriginalPitch   = fields.StructField('B')
    chPitchCorrection = fields.StructField('b')
    wSampleLink       = fields.StructField('H')
    sfSampleType      = fields.StructField('H', enum=SampleType)

    def sample_name(self) -> str:
        return str_from_fixedstr(self.achSampleName.value)


class Zone(Record):
    '''sfPresetBag and sfInstBag share the same layout'''
    wGenNdx = fields.StructField('H')
    wModNdx = fields.StructField('H')

    def generator_index(self) -> int:
        return self.wGenNdx.value

    def modulator_index(self) -> int:
        return self.wModNdx.value


class Generator(Record):
    '''sfGenList and sfInstGenList: the amount is a union whose meaning depends on the operator,
    so it's left uninterpreted and the caller chooses how to read it.'''
    sfGenOper = fields.StructField('H', enum=GeneratorOperator)
    genAmount = fields.StructField('H')

    def amount(self) -> int:
        '''shAmount: signed reading of the amount'''
        return struct.unpack('<h', self.genAmount.raw)[0]

    def amount_range(self):
        '''rangesType: (byLo, byHi)'''
        lo, hi = self.genAmount.raw
        return (lo, hi)


class Modulator(Record):
    '''sfModList and sfInstModList: 10 bytes'''
    sfModSrcOper    = fields.BitField('H', MODULATOR_LAYOUT)
    sfModDestOper   = fields.StructField('H')
    modAmount       = fields.StructField('h')
    sfModAmtSrcOper = fields.BitField('H', MODULATOR_LAYOUT)
    sfModTransOper  = fields.StructField('H')

    @staticmethod
    def source_type(operator):
        '''The curve of a source operator (sfModSrcOper or sfModAmtSrcOper), if known.'''
        value = operator.bits.type
        try:
            return ModulatorSourceType(value)
        except ValueError:
            return value


class Version(Record):
    '''sfVersionTag'''
    wMajor = fields.StructField('H')
    wMinor = fields.StructField('H')

    def as_tuple(self):
        return (self.wMajor.value, self.wMinor.value)
