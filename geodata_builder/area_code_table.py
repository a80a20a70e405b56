import bisect
import typing

from . import constants
from .errors import (DuplicatePrefixError, MissingLocationError,
                     UnorderedTableError)


class AreaCodeTable:
  """An ordered mapping from integer phone number prefixes to location names.

  Prefixes are kept in a sorted list rather than a hash table because both the
  debug dump and the delta encoding of the binary format depend on iterating
  them in ascending order. Tables are built once by the text parser or the
  splitter and are not meant to be modified afterwards."""

  def __init__(self, items: typing.Iterable[typing.Tuple[int, str]] = (),
               source: typing.Optional[str] = None):
    self.source = source
    self._prefixes: typing.List[int] = []
    self._locations: typing.List[str] = []
    for prefix, location in items:
      self.put(prefix, location)

  def put(self, prefix: int, location: str):
    """Insert a new mapping. Raises DuplicatePrefixError if the prefix is
    already present and MissingLocationError if the location is empty."""

    if prefix < 0 or prefix > constants.MAX_PREFIX:
      raise UnorderedTableError(prefix)
    if not location:
      raise MissingLocationError(prefix, source=self.source)

    # Input files are usually sorted already, so appending is the common case
    if not self._prefixes or prefix > self._prefixes[-1]:
      self._prefixes.append(prefix)
      self._locations.append(location)
      return

    index = bisect.bisect_left(self._prefixes, prefix)
    if self._prefixes[index] == prefix:
      raise DuplicatePrefixError(prefix, self.source)
    self._prefixes.insert(index, prefix)
    self._locations.insert(index, location)

  def get(self, prefix: int,
          default: typing.Optional[str] = None) -> typing.Optional[str]:
    index = bisect.bisect_left(self._prefixes, prefix)
    if index < len(self._prefixes) and self._prefixes[index] == prefix:
      return self._locations[index]
    return default

  def prefixes(self) -> typing.List[int]:
    return list(self._prefixes)

  def items(self) -> typing.Iterator[typing.Tuple[int, str]]:
    return zip(self._prefixes, self._locations)

  def __getitem__(self, prefix: int) -> str:
    location = self.get(prefix)
    if location is None:
      raise KeyError(prefix)
    return location

  def __contains__(self, prefix) -> bool:
    return self.get(prefix) is not None

  def __iter__(self) -> typing.Iterator[int]:
    return iter(self._prefixes)

  def __len__(self) -> int:
    return len(self._prefixes)

  def __eq__(self, other) -> bool:
    if not isinstance(other, AreaCodeTable):
      return NotImplemented
    return (self._prefixes == other._prefixes
            and self._locations == other._locations)

  def __repr__(self) -> str:
    return f"AreaCodeTable({list(self.items())!r})"

  def __str__(self) -> str:
    """Render one <prefix>|<location> line per mapping, in ascending order."""

    return ''.join(f"{prefix}|{location}\n" for prefix, location in self.items())
