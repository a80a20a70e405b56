"""Binary encoding of the language availability index (the config file), and
the provider the geocoder builds from it to pick an area code map file.

  varint   number of calling codes
  varint   calling code, ascending                            } repeated
  string   sorted language tags, each followed by a comma     }
"""

import typing

from .binary_io import BinaryReader, BinaryWriter
from .errors import CorruptDataError
from .language_index import LanguageIndex

LANGUAGE_TERMINATOR = ','

# Traditional Chinese data is published under a single script tag
LOCALE_NORMALIZATION_MAP = {
  'zh_TW': 'zh_Hant',
  'zh_HK': 'zh_Hant',
  'zh_MO': 'zh_Hant',
}


def encode(index: LanguageIndex) -> bytes:
  writer = BinaryWriter()
  writer.write_uvarint(len(index))
  for calling_code, languages in index.items():
    writer.write_uvarint(calling_code)
    writer.write_string(
      ''.join(language + LANGUAGE_TERMINATOR for language in languages))
  return writer.getvalue()


def decode(data: bytes) -> LanguageIndex:
  """Rebuild the index written by encode. Raises CorruptDataError on truncated
  or trailing data, calling codes out of order, or a language list that is not
  a sorted, comma terminated list of distinct tags."""

  reader = BinaryReader(data)
  index = LanguageIndex()
  previous = None
  for _ in range(reader.read_uvarint()):
    calling_code = reader.read_uvarint()
    if previous is not None and calling_code <= previous:
      raise CorruptDataError(
        f"calling code {calling_code} does not follow {previous}")
    previous = calling_code

    encoded_languages = reader.read_string()
    if not encoded_languages.endswith(LANGUAGE_TERMINATOR):
      raise CorruptDataError(
        f"language list of calling code {calling_code} is not terminated")
    languages = encoded_languages[:-1].split(LANGUAGE_TERMINATOR)
    if '' in languages or languages != sorted(set(languages)):
      raise CorruptDataError(
        f"invalid language list {encoded_languages!r} for {calling_code}")
    for language in languages:
      index.add(calling_code, language)
  reader.expect_end()
  return index


class MappingFileProvider:
  """Tells the geocoder which area code map file holds the location names for
  a calling code in a given language."""

  def __init__(self, index: LanguageIndex):
    self.index = index

  @classmethod
  def from_bytes(cls, data: bytes) -> 'MappingFileProvider':
    return cls(decode(data))

  @classmethod
  def read(cls, stream: typing.BinaryIO) -> 'MappingFileProvider':
    return cls.from_bytes(stream.read())

  def get_file_name(self, country_calling_code: int, language: str,
                    script: str = '', region: str = '') -> str:
    """Name of the file to load, e.g. 86_zh_Hant, or an empty string when no
    data exists for the calling code in that language."""

    if not language or country_calling_code not in self.index:
      return ''

    available = set(self.index.languages(country_calling_code))
    language_code = self._find_best_matching_language_code(
      available, language, script, region)
    if not language_code:
      return ''
    return f"{country_calling_code}_{language_code}"

  @staticmethod
  def _find_best_matching_language_code(available: typing.Set[str],
                                        language: str, script: str,
                                        region: str) -> str:
    full_locale = '_'.join(part for part in (language, script, region) if part)
    candidates = [full_locale]
    normalized = LOCALE_NORMALIZATION_MAP.get(full_locale)
    if normalized:
      candidates.append(normalized)
    if script:
      candidates.append(f"{language}_{script}")
    if region:
      candidates.append(f"{language}_{region}")
    candidates.append(language)

    for candidate in candidates:
      if candidate in available:
        return candidate
    return ''

  def __eq__(self, other) -> bool:
    if not isinstance(other, MappingFileProvider):
      return NotImplemented
    return self.index == other.index

  def __str__(self) -> str:
    return str(self.index)
