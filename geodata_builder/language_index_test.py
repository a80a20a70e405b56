import itertools
import unittest

from geodata_builder.errors import ConfigurationError
from geodata_builder.language_index import (LanguageIndex,
                                            add_configuration_mapping)


def build_index(*filenames) -> LanguageIndex:
  index = LanguageIndex()
  for filename in filenames:
    add_configuration_mapping(index, filename)
  return index


class AddConfigurationMappingTest(unittest.TestCase):
  def test_groups_languages_by_calling_code(self):
    index = build_index(
      '1_en', '1_en_US', '1_es', # US
      '33_fr', '33_en', # France
      '86_zh_Hans', # China
    )

    self.assertEqual(len(index), 3)
    self.assertEqual(index.calling_codes(), [1, 33, 86])
    self.assertEqual(index.languages(1), ['en', 'en_US', 'es'])
    self.assertEqual(index.languages(33), ['en', 'fr'])
    self.assertEqual(index.languages(86), ['zh_Hans'])

  def test_ignores_directories(self):
    index = build_index('generated/1201_en')
    self.assertEqual(index.languages(1201), ['en'])

  def test_adding_twice_has_no_effect(self):
    self.assertEqual(build_index('1_en', '1_en'), build_index('1_en'))

  def test_order_of_additions_does_not_matter(self):
    filenames = ('1_en', '1_en_US', '1_es')
    expected = build_index(*filenames)
    for ordering in itertools.permutations(filenames):
      self.assertEqual(build_index(*ordering), expected)
      self.assertEqual(build_index(*ordering).languages(1),
                       ['en', 'en_US', 'es'])

  def test_renders_sorted_languages(self):
    self.assertEqual(str(build_index('33_fr', '33_en', '1_es')),
                     "1|es,\n33|en,fr,\n")

  def test_unknown_calling_code_has_no_languages(self):
    index = build_index('1_en')
    self.assertNotIn(44, index)
    self.assertEqual(index.languages(44), [])

  def test_rejects_badly_named_files(self):
    test_cases = [
      'en_1', # Calling code comes first
      '1', # No language
      '1_', # Empty language
      'config',
      '\u0661_en', # Arabic-Indic digit one is not a calling code
      '33_en\n', # No trailing newline
    ]

    for filename in test_cases:
      with self.assertRaises(ConfigurationError, msg=repr(filename)):
        build_index(filename)

  def test_rejects_invalid_language_tags(self):
    with self.assertRaises(ConfigurationError):
      build_index('33_en,fr')


if __name__ == '__main__':
  unittest.main()
