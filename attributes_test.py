#!/usr/bin/env python3
# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

import collections
import unittest

from attributes import AttributeValueSet, ParseTokens
from log import InvalidValueError
from testutils import *


class ParseTokensTest(TestCase):

  def testString(self):
    self.assertEqual(ParseTokens('a b c'), ['a', 'b', 'c'])

  def testString_single(self):
    self.assertEqual(ParseTokens('a'), ['a'])

  def testString_empty(self):
    self.assertEqual(ParseTokens(''), [])

  def testString_dropsEmptyTokens(self):
    self.assertEqual(ParseTokens('a  b '), ['a', 'b'])
    self.assertEqual(ParseTokens('   '), [])

  def testString_trimsTokens(self):
    self.assertEqual(ParseTokens('\ta\n b\t'), ['a', 'b'])

  def testString_unicode(self):
    self.assertEqual(ParseTokens(TEST_UNICODE + ' x'), [TEST_UNICODE, 'x'])

  def testList(self):
    self.assertEqual(ParseTokens(['a', 'b']), ['a', 'b'])

  def testList_trimsAndDropsEmpty(self):
    self.assertEqual(ParseTokens([' a ', '', '  ', 'b']), ['a', 'b'])

  def testList_keepsInnerSpaces(self):
    self.assertEqual(ParseTokens(['a b']), ['a b'])

  def testTuple(self):
    self.assertEqual(ParseTokens(('a', 'b')), ['a', 'b'])

  def testOtherSequence(self):
    self.assertEqual(ParseTokens(collections.UserList(['a', ' b'])),
                     ['a', 'b'])

  def testInvalid(self):
    for value in (None, 42, 4.2, b'a b', {'a': 'b'}, ['a', 1], object()):
      with self.subTest(value=value):
        with self.assertRaises(InvalidValueError) as ctx:
          ParseTokens(value)
        self.assertIs(ctx.exception.value, value)


class AttributeValueSetTest(TestCase):

  def testConstruct_string(self):
    self.assertEqual(AttributeValueSet('a b').tokens, ('a', 'b'))

  def testConstruct_list(self):
    self.assertEqual(AttributeValueSet(['a', ' b ']).tokens, ('a', 'b'))

  def testConstruct_invalid(self):
    with self.assertRaises(InvalidValueError):
      AttributeValueSet(None)

  def testContains(self):
    values = AttributeValueSet('a b')
    self.assertTrue(values.Contains('a'))
    self.assertTrue(values.Contains('b'))
    self.assertFalse(values.Contains('c'))
    self.assertFalse(values.Contains('a b'))

  def testContains_doesNotTrim(self):
    self.assertFalse(AttributeValueSet('a').Contains(' a'))

  def testAdd_string(self):
    values = AttributeValueSet('a b')
    values.Add('c')
    self.assertEqual(values.Render(), 'a b c')

  def testAdd_multipleTokens(self):
    values = AttributeValueSet('a')
    values.Add(' b  c ')
    self.assertEqual(values.tokens, ('a', 'b', 'c'))

  def testAdd_list(self):
    values = AttributeValueSet('a')
    values.Add(['b', 'c'])
    self.assertEqual(values.tokens, ('a', 'b', 'c'))

  def testAdd_keepsDuplicates(self):
    values = AttributeValueSet('a b')
    values.Add('a')
    self.assertEqual(values.Render(), 'a b a')

  def testAdd_invalidDoesNotMutate(self):
    values = AttributeValueSet('a')
    with self.assertRaises(InvalidValueError):
      values.Add(['b', None])
    self.assertEqual(values.tokens, ('a',))

  def testSet(self):
    values = AttributeValueSet('a b')
    values.Set('c d')
    self.assertEqual(values.Render(), 'c d')

  def testSet_list(self):
    values = AttributeValueSet('a b')
    values.Set(['c'])
    self.assertEqual(values.tokens, ('c',))

  def testSet_invalidDoesNotMutate(self):
    values = AttributeValueSet('a')
    with self.assertRaises(InvalidValueError):
      values.Set(42)
    self.assertEqual(values.tokens, ('a',))

  def testRemove(self):
    values = AttributeValueSet('a b')
    values.Remove('a')
    self.assertEqual(values.Render(), 'b')

  def testRemove_allOccurrences(self):
    values = AttributeValueSet('a b a c a')
    values.Remove('a')
    self.assertEqual(values.Render(), 'b c')

  def testRemove_absent(self):
    values = AttributeValueSet('a b')
    values.Remove('c')
    self.assertEqual(values.Render(), 'a b')

  def testRemove_untilEmpty(self):
    values = AttributeValueSet('a')
    values.Remove('a')
    self.assertEqual(values.tokens, ())
    self.assertEqual(values.Render(), '')

  def testRender_collapsesSpaces(self):
    self.assertEqual(AttributeValueSet('  a   b  ').Render(), 'a b')

  def testRender_empty(self):
    self.assertEqual(AttributeValueSet('').Render(), '')
    self.assertEqual(AttributeValueSet([]).Render(), '')

  def testRender_specialCharsNotEscaped(self):
    self.assertEqual(AttributeValueSet(SPECIAL_CHARS).Render(), SPECIAL_CHARS)

  def testStr(self):
    self.assertEqual(str(AttributeValueSet('a b')), 'a b')

  def testRepr(self):
    self.assertEqual(repr(AttributeValueSet('a b')),
                     "AttributeValueSet(['a', 'b'])")

  def testTokensIsACopy(self):
    values = AttributeValueSet('a')
    tokens = values.tokens
    values.Add('b')
    self.assertEqual(tokens, ('a',))


if __name__ == '__main__':
  unittest.main()
