# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

from lxml import etree
from lxml.etree import _Element

from log import InvalidValueError
from nodes import ElementNode, Node, TextNode


def ToEtree(node: Node) -> _Element:
  """Converts an element and its descendants into an lxml element tree.

  Text nodes become the text of their parent element if they come before any
  child element, else the tail of the preceding child element. Adjacent text
  nodes are concatenated. Walks the tree with an explicit stack, so deep
  trees do not hit the Python recursion limit.

  Args:
    node: The element to convert.

  Raises:
    InvalidValueError: If the node is not an element.
    ValueError: If lxml rejects a tag or attribute name.
  """
  if not isinstance(node, ElementNode):
    raise InvalidValueError(f'cannot convert to an XML element: {node!r}',
                            value=node)
  root_elem = etree.Element(node.tag)
  pending = [(node, root_elem)]
  while pending:
    node, elem = pending.pop()
    for key in node.attribute_names:
      elem.set(key, node.GetAttribute(key))

    last_child_elem = None
    for child in node.children:
      if isinstance(child, TextNode):
        _AppendTextToXml(child.text, tail_elem=last_child_elem, text_elem=elem)
      else:
        last_child_elem = etree.SubElement(elem, child.tag)
        pending.append((child, last_child_elem))
  return root_elem


def _AppendTextToXml(text: str, *,
                     tail_elem: _Element | None,
                     text_elem: _Element) -> None:
  """Appends text to an XML element.

  Appends the text to tail_elem tail if not None, else to text_elem text.
  """
  if text:
    if tail_elem is not None:
      tail_elem.tail = (tail_elem.tail or '') + text
    else:
      text_elem.text = (text_elem.text or '') + text
