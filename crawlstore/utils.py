from __future__ import annotations
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

def unique_dir_name() -> str:
  stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S-%f")
  return f"{stamp}-{uuid4().hex[:12]}"

def is_safe_name(name: str) -> bool:
  return bool(name) and name not in (".", "..") and not any(c in name for c in "/\\\0")

def count_files(path: Path) -> int:
  return sum(1 for entry in path.iterdir() if entry.is_file()) if path.is_dir() else 0
