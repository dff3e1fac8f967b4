from __future__ import annotations
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Literal, Type, TypedDict, Unpack
from . import env
from .storages import STORAGE_MAP, MemoryStorage, Storage, StorageType

class StorageOpts(TypedDict, total=False):
  storage: Type[Storage] | StorageType | str
  directory: Path | str | None
  base_dir: Path | str | None
  compress: bool
  verbosity: Literal[0, 1, 2]
  missing_ok: bool

class ResultStorage:
  """
  Configuration for the content store of one crawl run.
  Relative directories resolve against `base_dir` (the working directory by default).
  """
  def __init__(self, **opts: Unpack[StorageOpts]):
    storage = opts.get("storage", env.storage_type)
    self.storage = StorageType.from_text(storage) if isinstance(storage, str) else storage
    self.directory = Path(opts.get("directory", env.storage_dir) or ".")
    self.base_dir = Path(opts.get("base_dir") or Path.cwd())
    self.compress = opts.get("compress", env.compression)
    self.verbosity = opts.get("verbosity", env.verbosity)
    self.missing_ok = opts.get("missing_ok", False)

  def __call__(self, **override_opts: Unpack[StorageOpts]) -> ResultStorage:
    opts = StorageOpts(**{**self.__dict__, **override_opts})
    return ResultStorage(**opts)

  @property
  def storage_dir(self) -> Path:
    return self.directory if self.directory.is_absolute() else self.base_dir / self.directory

  def create(self) -> Storage:
    storage_cls = STORAGE_MAP[self.storage] if isinstance(self.storage, StorageType) else self.storage
    if issubclass(storage_cls, MemoryStorage):
      return storage_cls(compress=self.compress, verbosity=self.verbosity)
    return storage_cls(self.storage_dir, compress=self.compress, verbosity=self.verbosity, missing_ok=self.missing_ok)

  @contextmanager
  def session(self) -> Iterator[Storage]:
    storage = self.create()
    try:
      yield storage
    finally:
      storage.clear()

  def to_dict(self) -> dict[str, object]:
    storage = self.storage.to_text() if isinstance(self.storage, StorageType) else self.storage.__name__
    return {
      "storage": storage,
      "directory": str(self.storage_dir),
      "compress": self.compress,
      "verbosity": self.verbosity,
      "missing_ok": self.missing_ok,
    }

  def __repr__(self) -> str:
    return f"<ResultStorage {self.storage} compress={self.compress}>"
