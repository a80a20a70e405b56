"""Reader for the human-edited area code mapping files.

Each line of a mapping file maps a phone number prefix (calling code followed
by the leading digits of the national number) to the name of a location, in
the language of the directory the file lives in:

  # Comments and blank lines are ignored
  331|Paris
  334|Marseille

Trailing whitespace after the location is dropped."""

import re
import typing

from . import constants
from .area_code_table import AreaCodeTable
from .errors import MalformedLineError, MissingLocationError

PREFIX_PATTERN = re.compile(r"[0-9]+")
SEPARATOR = '|'
COMMENT_MARKER = '#'


def iter_mappings(stream: typing.BinaryIO,
                  source: typing.Optional[str] = None
                  ) -> typing.Iterator[typing.Tuple[int, str]]:
  """Yield a (prefix, location) pair for every mapping line of a UTF-8 byte
  stream, in file order. Duplicates are not detected here."""

  for line_number, raw_line in enumerate(stream, start=1):
    try:
      # Editors on some platforms prepend a byte order mark
      line = raw_line.decode('utf-8-sig' if line_number == 1 else 'utf-8')
    except UnicodeDecodeError:
      raise MalformedLineError(repr(raw_line), line_number, source)

    line = line.rstrip('\r\n')
    if not line.strip() or line.startswith(COMMENT_MARKER):
      continue

    fields = line.split(SEPARATOR)
    if len(fields) != 2 or PREFIX_PATTERN.fullmatch(fields[0]) is None:
      raise MalformedLineError(line, line_number, source)

    prefix = int(fields[0])
    if prefix > constants.MAX_PREFIX:
      raise MalformedLineError(line, line_number, source)

    location = fields[1].rstrip()
    if not location:
      raise MissingLocationError(prefix, line_number, source)

    yield prefix, location


def parse(stream: typing.BinaryIO,
          source: typing.Optional[str] = None) -> AreaCodeTable:
  """Read a whole mapping file into an AreaCodeTable. Raises
  MalformedLineError, MissingLocationError or DuplicatePrefixError; no partial
  table is ever returned."""

  return AreaCodeTable(iter_mappings(stream, source), source=source)


def parse_file(path: str) -> AreaCodeTable:
  with open(path, 'rb') as stream:
    return parse(stream, source=path)
