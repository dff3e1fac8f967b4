import tempfile
from .result_storage import ResultStorage, StorageOpts
from .storages import (
  STORAGE_MAP, CodecError, DirectoryCreationError, FileStorage, MemoryStorage,
  NotFoundError, Storage, StorageClosedError, StorageError, StorageType, UnknownStorageType,
)

result_storage = ResultStorage()
memory_storage = ResultStorage(storage=StorageType.MEMORY, verbosity=0)
tmp_storage = ResultStorage(storage=StorageType.FILE, directory=f"{tempfile.gettempdir()}/result-storage")
