# -*- coding: utf-8 -*-
# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

import io
import sys
import unittest

from log import Logger
from nodes import ElementNode, TextNode


TEST_UNICODE = 'Îñţérñåţîöñåļîžåţîöñ'

# Characters that would need escaping in real markup; rendered verbatim.
SPECIAL_CHARS = '< > & " \''

# Depth of trees that recursive algorithms could not process.
DEEP_TREE_DEPTH = sys.getrecursionlimit() + 500


def MakeDeepTree(tag='div', depth=DEEP_TREE_DEPTH):
  """Returns a chain of nested elements ending with the text 'leaf'."""
  elem = ElementNode(tag, None, [TextNode('leaf')])
  for _ in range(depth - 1):
    elem = ElementNode(tag, None, [elem])
  return elem


class FakeLogger(Logger):
  """Records logged entries in a string buffer."""

  def __init__(self):
    self.info_file = io.StringIO()
    super().__init__(info_file=self.info_file)

  def ConsumeInfo(self):
    """Returns the info messages logged so far, then clears them."""
    output = self.info_file.getvalue().strip()
    self.info_file.seek(0)
    self.info_file.truncate()
    return output


class TestCase(unittest.TestCase):

  def __FailureMessage(self, *lines):  # pragma: no cover
    return '\n'.join(filter(None, lines))

  def assertTextEqual(self, actual, expected, msg=None):
    """Same as assertEqual but prints arguments without escaping them."""
    if not actual == expected:  # pragma: no cover
      if '\t' in actual or '\t' in expected:
        actual, expected = repr(actual), repr(expected)
      raise self.failureException(self.__FailureMessage(
          msg, f'Actual:\n{actual}\nExpected:\n{expected}'))

  def FakeOutputFile(self, *, fail=False):
    """Returns a fake output file supporting write() and getvalue().

    Args:
      fail: Whether the file should raise OSError on all writes.
    """
    if fail:
      class FakeErrorFile(io.StringIO):
        def write(self, unused_text):
          raise OSError('Fake write error')
      return FakeErrorFile()
    return io.StringIO()
