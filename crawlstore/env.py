import os

storage_type = os.environ.get("CRAWLSTORE_STORAGE", "memory")
storage_dir = os.environ.get("CRAWLSTORE_DIR", "tmp/result-storage")
compression = os.environ.get("CRAWLSTORE_COMPRESSION", "").strip().lower() in ("1", "true", "yes", "on")
verbosity = int(os.environ.get("CRAWLSTORE_VERBOSITY", "1"))
