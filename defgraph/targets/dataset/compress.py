"""zstd compression of the serialized dataset."""
from __future__ import annotations

import zstandard

DEFAULT_LEVEL = 19


def compress_payload(
    data: bytes,
    *,
    level: int = DEFAULT_LEVEL,
    threads: int = -1,
    long_distance_matching: bool = True,
) -> bytes:
    params = zstandard.ZstdCompressionParameters.from_level(
        level,
        enable_ldm=long_distance_matching,
        threads=threads,
        write_content_size=True,
    )
    return zstandard.ZstdCompressor(compression_params=params).compress(data)
