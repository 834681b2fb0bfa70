# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

from collections.abc import Callable, Iterable, Mapping

from attributes import ValueT
from nodes import ElementNode, Node


TagFactoryT = Callable[..., ElementNode]


def _TagFactory(tag: str) -> TagFactoryT:
  """Returns a function that creates elements of the given tag."""
  def Factory(attributes: Mapping[str, ValueT] | None=None,
              children: Iterable[Node]=()) -> ElementNode:
    return ElementNode(tag, attributes, children)
  Factory.__name__ = Factory.__qualname__ = tag.capitalize()
  Factory.__doc__ = f'Creates a <{tag}> element.'
  return Factory


A = _TagFactory('a')
Div = _TagFactory('div')
Li = _TagFactory('li')
Ol = _TagFactory('ol')
P = _TagFactory('p')
Span = _TagFactory('span')
Table = _TagFactory('table')
Td = _TagFactory('td')
Th = _TagFactory('th')
Tr = _TagFactory('tr')
Ul = _TagFactory('ul')

TAG_FACTORIES: dict[str, TagFactoryT] = {
    factory.__name__.lower(): factory
    for factory in (A, Div, Li, Ol, P, Span, Table, Td, Th, Tr, Ul)
}
