from typing import Type
from .file_storage import FileStorage
from .memory_storage import MemoryStorage
from .storage import (
  CodecError, DirectoryCreationError, NotFoundError, Storage, StorageClosedError, StorageError,
)
from .storage_type import StorageType, UnknownStorageType

STORAGE_MAP: dict[StorageType, Type[Storage]] = {
  StorageType.MEMORY: MemoryStorage,
  StorageType.FILE: FileStorage,
}
