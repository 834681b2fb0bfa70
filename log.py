# Copyright 2011, Guillaume Ryder, GNU GPL v3 license

__author__ = 'Guillaume Ryder'

from typing import Any, Optional, TextIO, Union


MessageT = Union[None, str, BaseException]


def FormatMessage(message: MessageT) -> str:
  """Formats a message to text."""
  return str(message) if message else 'unknown error'


class BaseError(Exception):
  """Base class for PyDom-specific errors."""

  # The error message, without trailing newline.
  message: str

  def __init__(self, message: Optional[str]=None):
    super().__init__()
    self.message = FormatMessage(message).rstrip()

  def __str__(self) -> str:
    return self.message


class InvalidValueError(BaseError):
  """Thrown when an attribute value is neither a string nor strings.

  Also thrown when appending a node would create a cycle.
  """

  def __init__(self, message: Optional[str]=None, *, value: Any=None):
    super().__init__(message)
    self.value = value


class AttributeNotFoundError(BaseError):
  """Thrown when reading a missing attribute without a default value."""

  def __init__(self, key: str):
    super().__init__(f'attribute does not exist: {key}')
    self.key = key


class IndexOutOfRangeError(BaseError):
  """Thrown when accessing a child position that does not exist."""

  def __init__(self, index: int, count: int):
    super().__init__(
        f'child index out of range: {index}; expected 0 <= index < {count}')
    self.index = index
    self.count = count


class OutputError(BaseError):
  """Thrown when rendered markup cannot be written to its destination."""


class Logger:
  """Logs informational messages."""

  def __init__(self, *, info_file: Optional[TextIO]):
    self.__info_file = info_file

  def LogInfo(self, message: str) -> None:
    """Prints a log entry to the info file if set.

    Args:
      message: The message to log.
    """
    if self.__info_file:
      print(message, file=self.__info_file, flush=True)
