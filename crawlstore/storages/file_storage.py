from __future__ import annotations
from pathlib import Path
from typing import Literal
from ..utils import count_files, is_safe_name, unique_dir_name
from .storage import DirectoryCreationError, NotFoundError, Storage, StorageClosedError

def make_base_dir(directory: Path):
  try:
    directory.mkdir(mode=0o777, parents=True, exist_ok=True)
  except OSError as ex:
    # A base directory created concurrently by someone else is still usable
    if not directory.is_dir():
      raise DirectoryCreationError(f'Directory "{directory}" was not created') from ex

def make_instance_dir(directory: Path, attempts=3) -> Path:
  make_base_dir(directory)
  for _ in range(attempts):
    path = directory / unique_dir_name()
    try:
      path.mkdir(mode=0o777)
      return path
    except FileExistsError:
      continue
    except OSError as ex:
      raise DirectoryCreationError(f'Directory "{path}" was not created') from ex
  raise DirectoryCreationError(f'No free instance directory name under "{directory}"')

class FileStorage(Storage):
  def __init__(
    self,
    directory: Path | str,
    compress=False,
    verbosity: Literal[0, 1, 2] = 1,
    missing_ok=False,
  ):
    super().__init__(compress, verbosity)
    self.directory = Path(directory)
    self.missing_ok = missing_ok
    self.instance_dir = make_instance_dir(self.directory)
    self.log(1, "CREATED", str(self.instance_dir), "blue")

  def __len__(self):
    return count_files(self.instance_dir)

  @property
  def extension(self) -> str:
    return "gz" if self.compress else "txt"

  def get_path(self, uq_id: str) -> Path:
    if not is_safe_name(uq_id):
      raise ValueError(f"Identifier {uq_id!r} cannot be used as a file name")
    return self.instance_dir / f"{uq_id}.{self.extension}"

  def save(self, uq_id, content):
    path = self.get_path(uq_id)
    try:
      path.write_bytes(self.encode(content))
    except FileNotFoundError as ex:
      if self.instance_dir.is_dir():
        raise
      raise StorageClosedError(f"Instance directory {self.instance_dir} was removed by clear()") from ex
    self.log(2, "SAVED", uq_id, "blue")

  def load(self, uq_id):
    path = self.get_path(uq_id)
    try:
      content = path.read_bytes()
    except FileNotFoundError as ex:
      if self.missing_ok:
        return b""
      raise NotFoundError(f"No content stored for '{uq_id}' at {path}") from ex
    self.log(2, "LOADED", uq_id, "green")
    return self.decode(content)

  def exists(self, uq_id):
    return self.get_path(uq_id).is_file()

  def delete(self, uq_id):
    path = self.get_path(uq_id)
    if path.exists():
      path.unlink(missing_ok=True)
      self.log(2, "DELETED", uq_id, "yellow")

  def delete_all(self):
    if not self.instance_dir.is_dir():
      return
    files = [path for path in self.instance_dir.iterdir() if path.is_file()]
    for path in files:
      path.unlink(missing_ok=True)
    if files:
      self.log(1, "CLEARED", f"{len(files)} files from {self.instance_dir}", "yellow")

  def clear(self):
    """Terminal: the instance directory is gone afterwards and `save` raises StorageClosedError."""
    self.delete_all()
    if self.instance_dir.is_dir():
      self.instance_dir.rmdir()
