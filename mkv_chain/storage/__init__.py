# mkv_chain/storage/__init__.py
# Lossless persisted representation of the numeric types.

from mkv_chain.storage.serializer import (
    SerializationError,
    dumps,
    load,
    loads,
    save,
)
