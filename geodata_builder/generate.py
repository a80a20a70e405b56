# Converts the human-edited area code mapping files into the binary files read
# by the geocoder.
#
# The input directory holds one directory per language, each containing one
# text file per country calling code:
#
#   geocoding/en/1.txt
#   geocoding/en/33.txt
#   geocoding/zh_Hans/86.txt
#
# Every text file produces one binary area code map named
# <calling code>_<language> in the output directory, except the North American
# Numbering Plan (calling code 1) whose table is split into one file per area
# code, e.g. 1201_en. A final config file records which languages are available
# for each prefix.

import argparse
import logging
import os
import sys
import typing
import uuid

from . import area_code_map
from . import constants
from . import mapping_file_provider
from . import text_mapping
from .area_code_table import AreaCodeTable
from .errors import ConfigurationError, GeoDataError
from .language_index import LanguageIndex, add_configuration_mapping
from .splitter import FileDescriptor, split_map

logger = logging.getLogger(__name__)


def find_input_files(input_dir: str
                     ) -> typing.List[typing.Tuple[str, int, str]]:
  """List (language, calling code, path) for every mapping file under the
  input directory, sorted so runs are reproducible."""

  input_files = []
  for language in sorted(os.listdir(input_dir)):
    language_dir = os.path.join(input_dir, language)
    if not os.path.isdir(language_dir):
      continue
    for name in sorted(os.listdir(language_dir)):
      calling_code, suffix = os.path.splitext(name)
      if suffix != constants.TEXT_FILE_SUFFIX:
        continue
      if not calling_code.isdigit() or not calling_code.isascii():
        raise ConfigurationError(
          f"{os.path.join(language_dir, name)}: file name is not a calling code")
      input_files.append(
        (language, int(calling_code), os.path.join(language_dir, name)))
  return input_files


def output_descriptors(table: AreaCodeTable, calling_code: int, language: str,
                       output_dir: str) -> typing.List[FileDescriptor]:
  """Decide which binary files a country's table is written to. Only prefixes
  that start with the calling code get a file; split_map rejects the others."""

  if calling_code == constants.NANPA_COUNTRY_CODE:
    country_prefix = str(calling_code)
    prefixes = sorted({
      str(prefix)[:constants.NANPA_PREFIX_LENGTH] for prefix in table
      if str(prefix).startswith(country_prefix)})
  else:
    prefixes = [str(calling_code)]

  return [
    FileDescriptor(
      os.path.join(output_dir,
                   f"{prefix}{constants.FILE_NAME_SEPARATOR}{language}"),
      prefix)
    for prefix in prefixes
  ]


def write_atomically(path: str, data: bytes):
  """Write to a temporary file first so an aborted run never leaves a partial
  file under the final name."""

  temporary_path = f"{path}.{uuid.uuid4()}"
  try:
    with open(temporary_path, 'wb') as outfile:
      outfile.write(data)
    os.replace(temporary_path, path)
  except OSError:
    if os.path.exists(temporary_path):
      os.remove(temporary_path)
    raise


def convert_file(path: str, calling_code: int, language: str, output_dir: str,
                 index: LanguageIndex) -> typing.List[str]:
  """Convert one text file, register its outputs in the index and return the
  paths written."""

  table = text_mapping.parse_file(path)
  logger.info(f"Read {len(table)} prefixes from {path}")

  descriptors = output_descriptors(table, calling_code, language, output_dir)
  written = []
  for descriptor, split_table in split_map(table, descriptors).items():
    add_configuration_mapping(index, descriptor.handle)
    write_atomically(descriptor.handle, area_code_map.encode(split_table))
    logger.debug(f"Wrote {len(split_table)} prefixes to {descriptor.handle}")
    written.append(descriptor.handle)
  return written


def generate(input_dir: str, output_dir: str) -> LanguageIndex:
  """Convert every mapping file under input_dir and write the config file.
  The first error aborts the run."""

  os.makedirs(output_dir, exist_ok=True)
  index = LanguageIndex()
  output_count = 0
  for language, calling_code, path in find_input_files(input_dir):
    output_count += len(
      convert_file(path, calling_code, language, output_dir, index))

  config_path = os.path.join(output_dir, constants.CONFIG_FILE_NAME)
  write_atomically(config_path, mapping_file_provider.encode(index))
  logger.info(
    f"Wrote {output_count} area code maps and {config_path} for "
    f"{len(index)} prefixes")
  return index


def dump(path: str, config: bool = False) -> str:
  """Render a binary file in its textual debug form."""

  with open(path, 'rb') as infile:
    if config:
      return str(mapping_file_provider.MappingFileProvider.read(infile))
    return str(area_code_map.AreaCodeMap.read(infile))


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog='geodata-builder',
    description='''Converts area code to location mapping files into the binary
    files used by the phone number geocoder.''')
  parser.add_argument('-v', '--verbose', action='store_true', help='''Log
    every file written.''')
  subparsers = parser.add_subparsers(dest='command', required=True)

  build = subparsers.add_parser('build', help='''Convert a directory of mapping
    files.''')
  build.add_argument('-i', '--input-dir', dest='input_dir',
    default=constants.DEFAULT_INPUT_DIR, type=str, help='''The directory
    holding one sub-directory of <calling code>.txt files per language.''')
  build.add_argument('-o', '--output-dir', dest='output_dir',
    default=constants.DEFAULT_OUTPUT_DIR, type=str, help='''The directory to
    which the binary files will be written. Existing files with the same names
    will be overwritten.''')

  dump_command = subparsers.add_parser('dump', help='''Print a binary file in
    its <prefix>|<value> text form.''')
  dump_command.add_argument('path', type=str, help='''The binary file to
    print.''')
  dump_command.add_argument('--config', action='store_true', help='''Read the
    file as a language availability index rather than an area code map.''')
  return parser


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
  args = build_parser().parse_args(argv)
  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.INFO,
    format='%(levelname)s: %(message)s')

  try:
    if args.command == 'build':
      logger.info(f"Converting mapping files from {os.path.abspath(args.input_dir)}")
      generate(args.input_dir, args.output_dir)
    else:
      sys.stdout.write(dump(args.path, config=args.config))
  except (GeoDataError, OSError) as err:
    logger.error(err)
    return 1
  return 0


if __name__ == '__main__':
  sys.exit(main())
