from typing import Literal
from .storage import Storage

class MemoryStorage(Storage):
  def __init__(self, compress=False, verbosity: Literal[0, 1, 2] = 0):
    super().__init__(compress, verbosity)
    self.item_map: dict[str, bytes] = {}

  def __len__(self):
    return len(self.item_map)

  def save(self, uq_id, content):
    self.item_map[uq_id] = self.encode(content)
    self.log(2, "SAVED", uq_id, "blue")

  def load(self, uq_id):
    content = self.item_map.get(uq_id, b"")
    # Missing ids map to b"", which is never valid gzip data
    if content:
      content = self.decode(content)
      self.log(2, "LOADED", uq_id, "green")
    return content

  def exists(self, uq_id):
    return uq_id in self.item_map

  def delete(self, uq_id):
    if self.item_map.pop(uq_id, None) is not None:
      self.log(2, "DELETED", uq_id, "yellow")

  def delete_all(self):
    count = len(self.item_map)
    self.item_map.clear()
    if count:
      self.log(1, "CLEARED", f"{count} entries from memory", "yellow")

  def clear(self):
    self.delete_all()
