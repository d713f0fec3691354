"""
Configuration constants for the export service.
"""

# Interval between status checks imposed by the Logs API
DEFAULT_POLL_INTERVAL = 10.0  # seconds

# Parts are downloaded one at a time unless the caller asks for more
DEFAULT_MAX_PARALLEL_PARTS = 1

# Chunk size used when copying a part stream to disk
DOWNLOAD_CHUNK_SIZE = 64 * 1024  # 64KB

# Part file name: "{counter}_{request}_{part}-<unique>.csv"
PART_FILE_PREFIX = "{counter_id}_{request_id}_{part_number}-"
PART_FILE_SUFFIX = ".csv"
