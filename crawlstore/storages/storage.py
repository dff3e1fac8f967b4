from __future__ import annotations
import gzip
import zlib
from typing import Literal
from ..print_status import Color, print_status

class StorageError(Exception):
  pass

class DirectoryCreationError(StorageError):
  pass

class NotFoundError(StorageError):
  pass

class CodecError(StorageError):
  pass

class StorageClosedError(StorageError):
  pass

class Storage:
  """
  Contract shared by every content backend.
  `load` of an id that was never saved is backend-specific: MemoryStorage
  returns b"", FileStorage raises NotFoundError unless built with missing_ok.
  Use `exists` to tell a missing id apart from stored empty content.
  """
  verbosity: Literal[0, 1, 2]

  def __init__(self, compress=False, verbosity: Literal[0, 1, 2] = 0):
    self._compress = bool(compress)
    self.verbosity = verbosity

  @property
  def compress(self) -> bool:
    return self._compress

  def encode(self, content: bytes) -> bytes:
    return gzip.compress(content) if self._compress else content

  def decode(self, content: bytes) -> bytes:
    if not self._compress:
      return content
    try:
      return gzip.decompress(content)
    except (gzip.BadGzipFile, EOFError, zlib.error) as ex:
      raise CodecError("Stored content is not valid gzip data") from ex

  def log(self, level: int, title: str, text: str, color: Color):
    print_status(self.verbosity >= level, title, text, color)

  def save(self, uq_id: str, content: bytes) -> None: ...

  def load(self, uq_id: str) -> bytes: ...

  def exists(self, uq_id: str) -> bool: ...

  def delete(self, uq_id: str) -> None: ...

  def delete_all(self) -> None: ...

  def clear(self) -> None: ...
