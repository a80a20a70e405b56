import os
import re
import typing

from . import constants
from .errors import ConfigurationError

# <calling code>_<language tag>, where the tag may itself contain underscores
CONFIGURATION_FILE_NAME_PATTERN = re.compile(r"([0-9]+)_(.+)")


class LanguageIndex:
  """The set of language tags available for each country calling code.

  Languages are held as sets, so adding a tag twice has no effect, and are
  always handed out in lexicographic order regardless of insertion order."""

  def __init__(self):
    self._languages: typing.Dict[int, typing.Set[str]] = {}

  def add(self, calling_code: int, language: str):
    if calling_code < 0:
      raise ConfigurationError(
        f"calling code must not be negative: {calling_code}")
    if not language or ',' in language:
      raise ConfigurationError(f"invalid language tag: {language!r}")
    self._languages.setdefault(calling_code, set()).add(language)

  def calling_codes(self) -> typing.List[int]:
    return sorted(self._languages)

  def languages(self, calling_code: int) -> typing.List[str]:
    """Languages available for the calling code, sorted. Empty if the calling
    code is unknown."""

    return sorted(self._languages.get(calling_code, ()))

  def items(self) -> typing.Iterator[typing.Tuple[int, typing.List[str]]]:
    for calling_code in self.calling_codes():
      yield calling_code, self.languages(calling_code)

  def __contains__(self, calling_code) -> bool:
    return calling_code in self._languages

  def __len__(self) -> int:
    return len(self._languages)

  def __eq__(self, other) -> bool:
    if not isinstance(other, LanguageIndex):
      return NotImplemented
    return self._languages == other._languages

  def __repr__(self) -> str:
    return f"LanguageIndex({dict(self.items())!r})"

  def __str__(self) -> str:
    """Render one <calling code>|<lang>,<lang>,...,<lang>, line per country."""

    return ''.join(
      f"{calling_code}|{''.join(language + ',' for language in languages)}\n"
      for calling_code, languages in self.items())


def add_configuration_mapping(index: LanguageIndex, filename: str):
  """Record the language of an output file in the index. The file name, with
  any leading directories ignored, must look like 1_en, 1201_en or
  86_zh_Hans: only the first underscore separates the calling code from the
  language tag."""

  match = CONFIGURATION_FILE_NAME_PATTERN.fullmatch(
    os.path.basename(filename))
  if match is None:
    raise ConfigurationError(
      f"{filename!r} is not named <calling code>"
      f"{constants.FILE_NAME_SEPARATOR}<language>")
  index.add(int(match.group(1)), match.group(2))
