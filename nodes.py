# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

from __future__ import annotations

__author__ = 'Guillaume Ryder'

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, override, TypeVar

from attributes import AttributeValueSet, ValueT
from log import AttributeNotFoundError, IndexOutOfRangeError, InvalidValueError


# Indentation unit inserted once per depth level in pretty mode.
INDENT = '\t'

# Line separator inserted between tags and children in pretty mode.
NEWLINE = '\n'

# Name of the attribute holding CSS classes.
CLASS_ATTR = 'class'

# Marks GetAttribute() calls without default value.
_NO_DEFAULT: Any = object()


class Node(ABC):
  """A markup-producing unit of a document tree.

  Fields:
    _parent: The element whose children include this node,
      None if the node is a root. Maintained by ElementNode only.
  """

  def __init__(self) -> None:
    self._parent: ElementNode | None = None

  def __str__(self) -> str:
    return self.Render()

  @property
  def parent(self) -> ElementNode | None:
    return self._parent

  def HasClass(self, class_name: str) -> bool:
    """Returns whether the node has the given CSS class."""
    return False

  @abstractmethod
  def Render(self, pretty: bool=False, level: int=0) -> str:
    """Renders the node and its descendants to markup.

    Text and attribute values are emitted verbatim, without escaping.

    Args:
      pretty: Whether to insert newlines and indentation.
      level: The depth of the node, i.e. how many times to indent its lines
        in pretty mode. Ignored if pretty is false.
    """


NodeT = TypeVar('NodeT', bound=Node)


class TextNode(Node):
  """Literal text."""

  def __init__(self, text: str):
    super().__init__()
    self.__text = text

  def __repr__(self) -> str:
    return f'TextNode({self.__text!r})'

  @property
  def text(self) -> str:
    return self.__text

  @override
  def Render(self, pretty: bool=False, level: int=0) -> str:
    indent = INDENT * level if pretty else ''
    return indent + self.__text


class ElementNode(Node):
  """A named element with attributes and child nodes.

  Fields:
    __tag: The name of the element, such as 'div'.
    __attributes: The attributes of the element keyed by name,
      in insertion order.
    __children: The direct children of the element, in document order.
      Each child has this element as parent.
  """

  def __init__(self, tag: str,
               attributes: Mapping[str, ValueT] | None=None,
               children: Iterable[Node]=()):
    """
    Args:
      tag: The name of the element, must be non-empty.
      attributes: The initial attributes of the element: each value is
        either a space-separated string or a sequence of strings.
      children: The initial children of the element. Detached from their
        current parent, if any. Left untouched if construction fails.
    """
    if not isinstance(tag, str) or not tag:
      raise InvalidValueError(f'invalid tag name: {tag!r}', value=tag)
    super().__init__()
    self.__tag = tag
    self.__attributes: dict[str, AttributeValueSet] = {}
    self.__children: list[Node] = []
    if attributes is not None:
      for key, value in attributes.items():
        self.__attributes[key] = AttributeValueSet(value)

    # Validate all children before detaching any of them.
    children = list(children)
    for child in children:
      if not isinstance(child, Node):
        raise InvalidValueError(f'not a node: {child!r}', value=child)
    for child in children:
      self.Append(child)

  def __repr__(self) -> str:
    return f'<ElementNode {self.__tag}>'

  @property
  def tag(self) -> str:
    return self.__tag

  @property
  def attribute_names(self) -> tuple[str, ...]:
    return tuple(self.__attributes)

  @property
  def children(self) -> tuple[Node, ...]:
    return tuple(self.__children)

  # Attributes

  def SetAttribute(self, key: str, value: ValueT) -> ElementNode:
    """Sets an attribute, overwriting its current value if any.

    Returns:
      self, for chaining.
    """
    self.__attributes[key] = AttributeValueSet(value)
    return self

  def AddAttribute(self, key: str, value: ValueT) -> ElementNode:
    """Appends tokens to an attribute, creating the attribute if missing.

    Returns:
      self, for chaining.
    """
    attribute = self.__attributes.get(key)
    if attribute is None:
      self.SetAttribute(key, value)
    else:
      attribute.Add(value)
    return self

  def HasAttribute(self, key: str) -> bool:
    """Returns whether the attribute exists and has a non-empty value."""
    attribute = self.__attributes.get(key)
    return attribute is not None and bool(attribute.Render())

  def GetAttribute(self, key: str, default: Any=_NO_DEFAULT) -> Any:
    """Returns the value of an attribute, with tokens separated by spaces.

    Args:
      key: The name of the attribute.
      default: The value to return if the attribute does not exist.

    Raises:
      AttributeNotFoundError: If the attribute does not exist and no default
        value is given.
    """
    attribute = self.__attributes.get(key)
    if attribute is not None:
      return attribute.Render()
    if default is _NO_DEFAULT:
      raise AttributeNotFoundError(key)
    return default

  def RemoveAttribute(self, key: str, value: str | None=None) -> ElementNode:
    """Removes an attribute, or one of its tokens.

    Does nothing if the attribute does not exist.

    Args:
      key: The name of the attribute.
      value: If set, the token to remove from the attribute; the attribute
        itself is kept, possibly empty.

    Returns:
      self, for chaining.
    """
    if value is None:
      self.__attributes.pop(key, None)
    else:
      attribute = self.__attributes.get(key)
      if attribute is not None:
        attribute.Remove(value)
    return self

  def AddClass(self, class_name: ValueT) -> ElementNode:
    return self.AddAttribute(CLASS_ATTR, class_name)

  def RemoveClass(self, class_name: str) -> ElementNode:
    return self.RemoveAttribute(CLASS_ATTR, class_name)

  @override
  def HasClass(self, class_name: str) -> bool:
    attribute = self.__attributes.get(CLASS_ATTR)
    return attribute is not None and attribute.Contains(class_name)

  # Children

  def Append(self, node: NodeT) -> NodeT:
    """Appends a node as last child of this element.

    Moves the node: detaches it from its current parent first.

    Returns:
      The appended node, not self.

    Raises:
      InvalidValueError: If the node is not a Node, or is this element or one
        of its ancestors.
    """
    if not isinstance(node, Node):
      raise InvalidValueError(f'not a node: {node!r}', value=node)
    ancestor: ElementNode | None = self
    while ancestor is not None:
      if ancestor is node:
        raise InvalidValueError(
            f'cannot append {node!r} to itself or its descendants', value=node)
      ancestor = ancestor.parent

    previous_parent = node._parent  # pylint: disable=protected-access
    if previous_parent is not None:
      previous_parent.__children.remove(node)
    node._parent = self  # pylint: disable=protected-access
    self.__children.append(node)
    return node

  def AddText(self, text: str) -> TextNode:
    """Appends a new text node; returns it."""
    return self.Append(TextNode(text))

  def Get(self, index: int) -> Node:
    """Returns the direct child at the given position.

    Raises:
      IndexOutOfRangeError: If index is not in [0, Count()).
    """
    count = len(self.__children)
    if not 0 <= index < count:
      raise IndexOutOfRangeError(index, count)
    return self.__children[index]

  def First(self) -> Node:
    return self.Get(0)

  def Last(self) -> Node:
    return self.Get(len(self.__children) - 1)

  def Count(self) -> int:
    """Returns the number of direct children, ignoring deeper descendants."""
    return len(self.__children)

  def WithClass(self, class_name: str) -> list[Node]:
    """Returns the direct children that have the given CSS class."""
    return [child for child in self.__children if child.HasClass(class_name)]

  # Rendering

  @override
  def Render(self, pretty: bool=False, level: int=0) -> str:
    """See Node.Render().

    Each element renders as: opening tag, children joined with newlines,
    closing tag, all three joined with newlines. Walks the tree with an
    explicit stack, so the depth of the tree is not bounded by the Python
    recursion limit.
    """
    newline = NEWLINE if pretty else ''
    parts: list[str] = []
    # Pending work in reverse order: literal strings, or nodes to render.
    pending: list[str | tuple[Node, int]] = [(self, level)]
    while pending:
      item = pending.pop()
      if isinstance(item, str):
        parts.append(item)
        continue
      node, node_level = item
      if not isinstance(node, ElementNode):
        parts.append(node.Render(pretty, node_level))
        continue

      indent = INDENT * node_level if pretty else ''
      items: list[str | tuple[Node, int]] = [
          node.__OpeningTag(indent), newline]
      for i, child in enumerate(node.__children):
        if i:
          items.append(newline)
        items.append((child, node_level + 1))
      items.append(f'{newline}{indent}</{node.__tag}>')
      pending.extend(reversed(items))
    return ''.join(parts)

  def __OpeningTag(self, indent: str) -> str:
    attributes = ''.join(
        f' {key}="{attribute.Render()}"'
        for key, attribute in self.__attributes.items())
    return f'{indent}<{self.__tag}{attributes}>'
