#!/usr/bin/env python3
'''
Dump metadata, presets, instruments and samples of a SoundFont 2 file.

 $ sf2info.py GeneralUser.sf2
'''
import sys
import os
import logging

from sfstruct.sf2 import SoundFont
from sfstruct.exceptions import SoundStructException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <sf2 file>' % progname)
    sys.exit(1)


def dump_info(info):
    print(f'''INFO:
  Format version:  {info.format_version()}
  Sound engine:    {info.sound_engine()}
  Name:            {info.soundfont_name()}
  ROM name:        {info.rom_name()}
  ROM version:     {info.rom_version()}
  Date:            {info.date()}
  Author:          {info.author()}
  Product:         {info.product()}
  Copyright:       {info.copyright()}
  Comment:         {info.comment()}
  Tools:           {info.soundfont_tools()}''')


def dump_presets(sf2):
    for preset in sorted(sf2.preset_headers(), key=lambda x: x.bank_preset()):
        print(f'PRESET HEADER [{preset.bank():3d}:{preset.preset():3d}] {preset.preset_name()}')

    for zone in sf2.preset_zones():
        print(f'PRESET ZONE {zone.generator_index()} {zone.modulator_index()}')


def dump_instruments(sf2):
    for instrument in sf2.instrument_headers():
        print(f'INSTRUMENT {instrument.wInstBagNdx.value:5d} {instrument.instrument_name()}')

    for zone in sf2.instrument_zones():
        print(f'INSTRUMENT ZONE {zone.generator_index()} {zone.modulator_index()}')


def dump_samples(sf2):
    for sample in sf2.sample_headers():
        print(f'SAMPLE {sample.sample_name():<20} {sample.dwSampleRate.value:6d}Hz {sample.sfSampleType.value!r}')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]

    try:
        sf2 = SoundFont(path)
    except SoundStructException as e:
        logger.error(f'failed to parse \'{path}\': {e}')
        sys.exit(1)

    with sf2:
        # every section can fail on its own, show whatever is possible
        sections = [
            lambda: dump_info(sf2.info()),
            lambda: dump_presets(sf2),
            lambda: dump_instruments(sf2),
            lambda: dump_samples(sf2),
        ]
        for dump in sections:
            try:
                dump()
            except SoundStructException as e:
                logger.error(f'{e}')
