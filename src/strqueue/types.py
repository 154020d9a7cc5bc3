"""Type definitions for strqueue."""

from typing import Literal, TypeAlias

# Writable byte buffer a removed string is copied into
OutBuffer: TypeAlias = bytearray | memoryview

# Kinds of block the allocator hands out
BlockKind: TypeAlias = Literal["sentinel", "element", "payload"]
