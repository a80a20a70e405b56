"""Binary encoding of a single area code table, and the map the geocoder
builds from it.

Location names repeat heavily (every exchange of a town maps to the same
name) and prefixes arrive sorted and densely packed, so the encoding stores
each distinct name once and each prefix as its difference from the previous
one:

  varint   number of distinct locations
  string   location, repeated, in order of first use
  varint   number of prefixes
  varint   prefix delta, the first one being the prefix itself  } repeated
  varint   index into the location list                        }
"""

import typing

from . import constants
from .area_code_table import AreaCodeTable
from .binary_io import BinaryReader, BinaryWriter
from .errors import (CorruptDataError, MissingLocationError,
                     UnorderedTableError)


def encode(table: AreaCodeTable) -> bytes:
  """Serialize a table. Raises UnorderedTableError if its prefixes are not
  strictly ascending and within the signed 32-bit range, and
  MissingLocationError for an empty location."""

  location_indices: typing.Dict[str, int] = {}
  entries: typing.List[typing.Tuple[int, int]] = []
  previous = None
  for prefix, location in table.items():
    if prefix < 0 or prefix > constants.MAX_PREFIX:
      raise UnorderedTableError(prefix)
    if previous is not None and prefix <= previous:
      raise UnorderedTableError(prefix, previous)
    if not location:
      raise MissingLocationError(prefix)
    delta = prefix if previous is None else prefix - previous
    index = location_indices.setdefault(location, len(location_indices))
    entries.append((delta, index))
    previous = prefix

  writer = BinaryWriter()
  writer.write_uvarint(len(location_indices))
  # dicts keep insertion order, which is the order of first use
  for location in location_indices:
    writer.write_string(location)
  writer.write_uvarint(len(entries))
  for delta, index in entries:
    writer.write_uvarint(delta)
    writer.write_uvarint(index)
  return writer.getvalue()


def decode(data: bytes) -> AreaCodeTable:
  """Rebuild the table written by encode. Raises CorruptDataError on truncated
  or trailing data, unknown location indices, or prefixes that do not strictly
  ascend."""

  reader = BinaryReader(data)
  locations = []
  for _ in range(reader.read_uvarint()):
    location = reader.read_string()
    if not location:
      raise CorruptDataError("empty location name")
    locations.append(location)

  table = AreaCodeTable()
  prefix = None
  for position in range(reader.read_uvarint()):
    delta = reader.read_uvarint()
    index = reader.read_uvarint()
    if prefix is None:
      prefix = delta
    elif delta == 0:
      raise CorruptDataError(f"prefix #{position} does not follow {prefix}")
    else:
      prefix += delta
    if prefix > constants.MAX_PREFIX:
      raise CorruptDataError(f"prefix #{position} is out of range")
    if index >= len(locations):
      raise CorruptDataError(
        f"location index {index} of prefix {prefix} is out of range")
    table.put(prefix, locations[index])
  reader.expect_end()
  return table


class AreaCodeMap:
  """A read-only area code map as loaded by the geocoder from one binary
  file."""

  def __init__(self, table: AreaCodeTable):
    self.table = table
    self.possible_lengths = sorted(
      {len(str(prefix)) for prefix in table}, reverse=True)

  @classmethod
  def from_bytes(cls, data: bytes) -> 'AreaCodeMap':
    return cls(decode(data))

  @classmethod
  def read(cls, stream: typing.BinaryIO) -> 'AreaCodeMap':
    return cls.from_bytes(stream.read())

  def lookup(self, number: typing.Union[int, str]) -> typing.Optional[str]:
    """Return the location of the longest stored prefix that the number (calling
    code followed by the national number) starts with, or None."""

    digits = str(number)
    if not digits.isdigit() or not digits.isascii():
      return None

    for length in self.possible_lengths:
      if length > len(digits):
        continue
      candidate = digits[:length]
      # 0123 is not the prefix 123
      if len(candidate) > 1 and candidate.startswith('0'):
        continue
      location = self.table.get(int(candidate))
      if location is not None:
        return location
    return None

  def __len__(self) -> int:
    return len(self.table)

  def __eq__(self, other) -> bool:
    if not isinstance(other, AreaCodeMap):
      return NotImplemented
    return self.table == other.table

  def __str__(self) -> str:
    return str(self.table)
