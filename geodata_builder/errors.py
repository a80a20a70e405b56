import typing


class GeoDataError(Exception):
  """Base class for every error raised while converting geocoding data. Any
  of these aborts the conversion of the file being processed."""
  pass


class MalformedLineError(GeoDataError):
  """An error raised when a mapping line does not have the form
  <prefix>|<location>, or when its prefix is not a non-negative integer."""

  line: str # The offending line, without its line terminator
  line_number: int # 1-based position of the line in its source
  source: typing.Optional[str] # Name of the file being parsed, if known

  def __init__(self, line: str, line_number: int,
               source: typing.Optional[str] = None):
    self.line = line
    self.line_number = line_number
    self.source = source
    super().__init__(
      f"{_where(source, line_number)}: malformed mapping line {line!r}")


class MissingLocationError(GeoDataError):
  """An error raised when a prefix is mapped to an empty location."""

  prefix: int
  line_number: typing.Optional[int] # None when the mapping did not come from a file
  source: typing.Optional[str]

  def __init__(self, prefix: int, line_number: typing.Optional[int] = None,
               source: typing.Optional[str] = None):
    self.prefix = prefix
    self.line_number = line_number
    self.source = source
    message = f"missing location for prefix {prefix}"
    if line_number is not None:
      message = f"{_where(source, line_number)}: {message}"
    elif source is not None:
      message = f"{source}: {message}"
    super().__init__(message)


class DuplicatePrefixError(GeoDataError):
  """An error raised when the same prefix is mapped twice."""

  prefix: int
  source: typing.Optional[str]

  def __init__(self, prefix: int, source: typing.Optional[str] = None):
    self.prefix = prefix
    self.source = source
    message = f"duplicate prefix {prefix}"
    if source is not None:
      message = f"{source}: {message}"
    super().__init__(message)


class NoMatchingDescriptorError(GeoDataError):
  """An error raised when a table is split and one of its prefixes does not
  start with the prefix of any destination file."""

  prefix: int

  def __init__(self, prefix: int):
    self.prefix = prefix
    super().__init__(f"no output file matches prefix {prefix}")


class AmbiguousDescriptorError(GeoDataError):
  """An error raised when two destination files claim the same prefix."""

  prefix: str

  def __init__(self, prefix: str):
    self.prefix = prefix
    super().__init__(f"more than one output file uses prefix {prefix!r}")


class ConfigurationError(GeoDataError, ValueError):
  """An error raised when a file name or language tag cannot be turned into an
  entry of the language index or a destination for split tables."""
  pass


class UnorderedTableError(GeoDataError, ValueError):
  """An error raised when the encoder is handed prefixes that are not strictly
  ascending, or that fall outside the range of a signed 32-bit integer."""

  prefix: int

  def __init__(self, prefix: int, previous: typing.Optional[int] = None):
    self.prefix = prefix
    if previous is None:
      super().__init__(f"prefix {prefix} is out of range")
    else:
      super().__init__(f"prefix {prefix} does not follow prefix {previous}")


class CorruptDataError(GeoDataError):
  """An error raised when a binary artifact cannot be decoded: the stream is
  truncated, has trailing bytes, or violates the ordering of its records."""
  pass


def _where(source: typing.Optional[str], line_number: int) -> str:
  if source is None:
    return f"line {line_number}"
  return f"{source}:{line_number}"
