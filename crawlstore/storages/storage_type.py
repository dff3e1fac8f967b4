from __future__ import annotations
from enum import Enum
from .storage import StorageError

class UnknownStorageType(StorageError, ValueError):
  def __init__(self, text: str, supported: list[str]):
    self.text = text
    self.supported = supported
    super().__init__(f"Unknown storage type '{text}'. Supported values are: {', '.join(supported)}")

class StorageType(str, Enum):
  MEMORY = "memory"
  FILE = "file"

  @classmethod
  def from_text(cls, text: str) -> StorageType:
    normalized = text.strip().lower()
    for member in cls:
      if member.value == normalized:
        return member
    raise UnknownStorageType(normalized, cls.available_text_values())

  @classmethod
  def available_text_values(cls) -> list[str]:
    return [member.value for member in cls]

  def to_text(self) -> str:
    return self.value

  def __str__(self) -> str:
    return self.value
