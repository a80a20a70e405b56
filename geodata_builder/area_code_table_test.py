import unittest

from geodata_builder.area_code_table import AreaCodeTable
from geodata_builder.errors import (DuplicatePrefixError, MissingLocationError,
                                    UnorderedTableError)


class AreaCodeTableTest(unittest.TestCase):
  def test_iterates_in_ascending_order(self):
    table = AreaCodeTable([(334, 'Marseille'), (33, 'France'), (331, 'Paris')])
    self.assertEqual(list(table), [33, 331, 334])
    self.assertEqual(str(table), "33|France\n331|Paris\n334|Marseille\n")

  def test_lookup_by_prefix(self):
    table = AreaCodeTable([(331, 'Paris')])
    self.assertIn(331, table)
    self.assertNotIn(332, table)
    self.assertEqual(table.get(332, 'unknown'), 'unknown')
    with self.assertRaises(KeyError):
      table[332]

  def test_rejects_duplicate_prefix(self):
    table = AreaCodeTable([(331, 'Paris'), (334, 'Marseille')], source='33.txt')
    with self.assertRaises(DuplicatePrefixError):
      table.put(331, 'Paris')
    self.assertEqual(len(table), 2)

  def test_rejects_empty_location(self):
    try:
      AreaCodeTable([(331, '')], source='33.txt')
      self.fail('An exception should have been raised.')
    except MissingLocationError as err:
      self.assertEqual(err.prefix, 331)
      self.assertIsNone(err.line_number)
      self.assertEqual(str(err), '33.txt: missing location for prefix 331')

  def test_rejects_out_of_range_prefix(self):
    for prefix in (-1, 2**31):
      with self.assertRaises(UnorderedTableError, msg=prefix):
        AreaCodeTable([(prefix, 'Nowhere')])

  def test_equality_depends_on_contents(self):
    self.assertEqual(AreaCodeTable([(1, 'a'), (2, 'b')]),
                     AreaCodeTable([(2, 'b'), (1, 'a')]))
    self.assertNotEqual(AreaCodeTable([(1, 'a')]), AreaCodeTable([(1, 'b')]))


if __name__ == '__main__':
  unittest.main()
