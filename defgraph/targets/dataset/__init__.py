"""Dataset targets: the browsing dataset as zstd-compressed or plain JSON."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from ...base import GeneratedArtifact, GenerationOptions, GeneratorTarget
from ...parsing import ScanResult
from ...registry import register_target
from .compress import DEFAULT_LEVEL, compress_payload
from .document import build_dataset_payload
from .flatten import FlattenLimits

logger = logging.getLogger(__name__)


@register_target
class JsonDatasetGenerator(GeneratorTarget):
    """Writes the dataset payload as a single JSON document."""

    name = "json"
    default_filename = "dataset.json"
    artifact_type = "json"

    def generate(
        self,
        scan: ScanResult,
        options: GenerationOptions,
    ) -> list[GeneratedArtifact]:
        output_dir = Path(options.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        payload = build_dataset_payload(
            scan,
            options.version,
            limits=FlattenLimits.from_options(options.extra),
        )
        json_data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        logger.info("JSON size: %d bytes", len(json_data))

        data = self.encode(json_data, options)
        output_path = output_dir / str(options.extra.get("filename", self.default_filename))
        output_path.write_bytes(data)
        logger.info("Dataset file written: %s (%d bytes)", output_path, len(data))
        return [GeneratedArtifact(path=output_path, artifact_type=self.artifact_type, size_bytes=len(data))]

    def encode(self, json_data: bytes, options: GenerationOptions) -> bytes:
        return json_data


@register_target
class CompressedDatasetGenerator(JsonDatasetGenerator):
    """Writes the dataset payload as zstd-compressed JSON."""

    name = "dataset"
    default_filename = "dataset.json.zstd"
    artifact_type = "dataset"

    def encode(self, json_data: bytes, options: GenerationOptions) -> bytes:
        extra = options.extra
        compressed = compress_payload(
            json_data,
            level=int(extra.get("compression_level", DEFAULT_LEVEL)),
            threads=int(extra.get("threads", -1)),
            long_distance_matching=bool(extra.get("long_distance_matching", True)),
        )
        if json_data:
            reduction = 100 - (len(compressed) * 100 // len(json_data))
            logger.info("Compressed size: %d bytes (%d%% reduction)", len(compressed), reduction)
        return compressed

