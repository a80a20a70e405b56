import io
import unittest

from geodata_builder import mapping_file_provider
from geodata_builder.errors import CorruptDataError
from geodata_builder.language_index import (LanguageIndex,
                                            add_configuration_mapping)
from geodata_builder.mapping_file_provider import MappingFileProvider


def build_index(*filenames) -> LanguageIndex:
  index = LanguageIndex()
  for filename in filenames:
    add_configuration_mapping(index, filename)
  return index


class ProviderIndexCodecTest(unittest.TestCase):
  def test_outputs_binary_configuration(self):
    index = build_index(
      '1_en', '1_en_US', '1_es', '33_fr', '33_en', '86_zh_Hans')
    provider = MappingFileProvider.read(
      io.BytesIO(mapping_file_provider.encode(index)))

    self.assertEqual(str(provider), "1|en,en_US,es,\n33|en,fr,\n86|zh_Hans,\n")
    self.assertEqual(provider.index, index)

  def test_writes_languages_in_sorted_order(self):
    index = build_index('33_fr', '33_en')
    encoded = mapping_file_provider.encode(index)
    self.assertEqual(encoded, b'\x01\x21\x06en,fr,')
    self.assertEqual(str(mapping_file_provider.decode(encoded)), "33|en,fr,\n")

  def test_round_trip_of_empty_index(self):
    encoded = mapping_file_provider.encode(LanguageIndex())
    self.assertEqual(len(mapping_file_provider.decode(encoded)), 0)

  def test_decode_rejects_corrupt_data(self):
    test_cases = [
      b'\x01\x21\x06en,fr', # Truncated
      b'\x01\x21\x03en,\x00', # Trailing bytes
      b'\x01\x21\x02en', # Missing terminator
      b'\x01\x21\x04en,,', # Empty language
      b'\x01\x21\x06fr,en,', # Languages out of order
      b'\x01\x21\x06en,en,', # Repeated language
      b'\x02\x21\x03en,\x01\x03en,', # Calling codes out of order
    ]

    for case in test_cases:
      with self.assertRaises(CorruptDataError, msg=repr(case)):
        mapping_file_provider.decode(case)


class GetFileNameTest(unittest.TestCase):
  def setUp(self):
    self.provider = MappingFileProvider(build_index(
      '1_en', '1_en_US', '1_es', '86_zh', '86_zh_Hans', '86_zh_Hant'))

  def test_finds_best_matching_language(self):
    test_cases = [
      ((1, 'en'), '1_en'),
      ((1, 'en', '', 'US'), '1_en_US'),
      ((1, 'en', '', 'GB'), '1_en'),
      ((1, 'es', '', 'MX'), '1_es'),
      ((86, 'zh', 'Hans', 'CN'), '86_zh_Hans'),
      ((86, 'zh', '', 'TW'), '86_zh_Hant'),
      ((86, 'zh', '', 'HK'), '86_zh_Hant'),
      ((86, 'zh', '', 'CN'), '86_zh'),
    ]

    for arguments, expected in test_cases:
      self.assertEqual(self.provider.get_file_name(*arguments), expected,
                       arguments)

  def test_returns_empty_name_when_unavailable(self):
    self.assertEqual(self.provider.get_file_name(1, 'fr'), '')
    self.assertEqual(self.provider.get_file_name(44, 'en'), '')
    self.assertEqual(self.provider.get_file_name(1, ''), '')


if __name__ == '__main__':
  unittest.main()
