# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

from typing import Optional, TextIO

from log import Logger, OutputError
from nodes import ElementNode, Node, NEWLINE


def WriteMarkup(node: Node, writer: TextIO, *, pretty: bool=False,
                trailing_newline: bool=False,
                logger: Optional[Logger]=None) -> int:
  """Renders a tree and writes its markup.

  Args:
    node: The root of the tree to render, at indentation level 0.
    writer: The destination of the markup, any object with write(str).
    pretty: Whether to render with newlines and indentation.
    trailing_newline: Whether to write a newline after the markup.
    logger: If set, receives one informational message per call.

  Returns:
    The number of characters written.

  Raises:
    OutputError: If the writer fails.
  """
  markup = node.Render(pretty, 0)
  if trailing_newline:
    markup += NEWLINE
  try:
    writer.write(markup)
  except OSError as e:
    raise OutputError(f'cannot write markup: {e}') from e

  if logger is not None:
    name = node.tag if isinstance(node, ElementNode) else 'text'
    logger.LogInfo(f'wrote {name}: {len(markup)} characters')
  return len(markup)
