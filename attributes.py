# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

from collections.abc import Sequence
from typing import Union

from log import InvalidValueError


ValueT = Union[str, Sequence[str]]

# Separator between the tokens of an attribute value.
TOKEN_SEPARATOR = ' '


def ParseTokens(value: ValueT) -> list[str]:
  """Converts an attribute value into its list of tokens.

  Strings are split on single spaces. Each token is trimmed, and empty tokens
  (produced by consecutive or surrounding spaces) are dropped.

  Args:
    value: A space-separated string, or a sequence of strings.

  Raises:
    InvalidValueError: If the value is neither a string nor a sequence of
      strings.
  """
  if isinstance(value, str):
    pieces = value.split(TOKEN_SEPARATOR)
  elif (isinstance(value, Sequence) and
        all(isinstance(piece, str) for piece in value)):
    pieces = value
  else:
    raise InvalidValueError(
        f'invalid attribute value: {value!r}; '
        'expected a string or a sequence of strings',
        value=value)
  return [token for token in (piece.strip() for piece in pieces) if token]


class AttributeValueSet:
  """The ordered tokens of one attribute value, for instance CSS classes.

  Despite the name, duplicate tokens are kept: Add() never deduplicates.
  """

  def __init__(self, initial: ValueT):
    self.__tokens = ParseTokens(initial)

  def __repr__(self) -> str:
    return f'AttributeValueSet({self.__tokens!r})'

  def __str__(self) -> str:
    return self.Render()

  @property
  def tokens(self) -> tuple[str, ...]:
    return tuple(self.__tokens)

  def Contains(self, value: str) -> bool:
    """Returns whether some token equals the value exactly.

    The value is not trimmed.
    """
    return value in self.__tokens

  def Add(self, value: ValueT) -> None:
    """Appends the tokens of the value after the existing ones."""
    self.__tokens.extend(ParseTokens(value))

  def Set(self, value: ValueT) -> None:
    """Replaces all tokens with the tokens of the value."""
    self.__tokens = ParseTokens(value)

  def Remove(self, value: str) -> None:
    """Removes every token equal to the value; no-op if absent."""
    self.__tokens = [token for token in self.__tokens if token != value]

  def Render(self) -> str:
    return TOKEN_SEPARATOR.join(self.__tokens)
