import dataclasses
import os
import typing

from . import constants
from .area_code_table import AreaCodeTable
from .errors import (AmbiguousDescriptorError, ConfigurationError,
                     NoMatchingDescriptorError)


@dataclasses.dataclass(frozen=True)
class FileDescriptor:
  """A destination for part of a country's area code table. The handle is
  opaque to the splitter (usually the output path); the prefix is the string
  every routed phone number prefix must start with."""

  handle: typing.Any
  prefix: str

  def __post_init__(self):
    if not self.prefix.isdigit() or not self.prefix.isascii():
      raise ConfigurationError(
        f"descriptor prefix must be digits: {self.prefix!r}")

  @classmethod
  def from_path(cls, path: str) -> 'FileDescriptor':
    """Build a descriptor from an output file name such as 1201_en, whose
    prefix is everything before the first separator."""

    name = os.path.basename(path)
    prefix, separator, _ = name.partition(constants.FILE_NAME_SEPARATOR)
    if not separator:
      raise ConfigurationError(f"{path!r} has no language tag")
    return cls(path, prefix)


def split_map(table: AreaCodeTable,
              descriptors: typing.Sequence[FileDescriptor]
              ) -> typing.Dict[FileDescriptor, AreaCodeTable]:
  """Partition a table across descriptors. Each prefix goes to the descriptor
  with the longest prefix string that its decimal form starts with. Every
  descriptor appears in the result, with an empty table if nothing routed to
  it, and the result preserves the order of the descriptors."""

  by_prefix: typing.Dict[str, FileDescriptor] = {}
  for descriptor in descriptors:
    if descriptor.prefix in by_prefix:
      raise AmbiguousDescriptorError(descriptor.prefix)
    by_prefix[descriptor.prefix] = descriptor

  split_tables = {
    descriptor: AreaCodeTable(source=table.source) for descriptor in descriptors
  }
  for prefix, location in table.items():
    digits = str(prefix)
    for length in range(len(digits), 0, -1):
      descriptor = by_prefix.get(digits[:length])
      if descriptor is not None:
        split_tables[descriptor].put(prefix, location)
        break
    else:
      raise NoMatchingDescriptorError(prefix)

  return split_tables
