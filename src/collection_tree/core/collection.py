import json
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from collection_tree.core.config import CollectionConfig
from collection_tree.core.profiles import resolve_profile
from collection_tree.models import CollectionDocument, Event, Info, Metadata, Script, Variable

logger = logging.getLogger(__name__)

COLLECTION_FILE_NAME = "api-collection.json"
METADATA_FILE_NAME = "collection-metadata.json"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def isoformat_z(moment: datetime) -> str:
    """Format as ``2024-01-31T12:00:00.000Z`` (UTC, millisecond precision)."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


_GLOBAL_EVENTS = [
    Event(
        listen="prerequest",
        script=Script(exec=["console.log('Running request: ' + pm.info.requestName);"]),
    ),
    Event(
        listen="test",
        script=Script(
            exec=[
                'pm.test("Response has valid JSON", function () {',
                "    pm.response.to.be.json;",
                "});",
            ]
        ),
    ),
]


def build(
    config: CollectionConfig,
    profile: str | None = None,
    *,
    id_factory: Callable[[], str] = _new_id,
    clock: Clock = _utc_now,
) -> CollectionDocument:
    """Assemble the collection for ``profile`` (defaults to ``config.profile``).

    The base URL is substituted verbatim into every request URL.
    """
    selected = resolve_profile(profile or config.profile)
    generated = isoformat_z(clock())
    return CollectionDocument(
        info=Info(
            postman_id=id_factory(),
            name=f"{config.collection_name} - Build {config.build_number}",
            description=(
                "Automatically generated Postman collection for API testing. "
                f"Build: {config.build_number}, Generated: {generated}"
            ),
        ),
        item=selected.folders(config.base_url),
        event=list(_GLOBAL_EVENTS),
        variable=[
            Variable(key="base_url", value=config.base_url),
            Variable(key="build_number", value=config.build_number),
        ],
    )


def serialize(doc: CollectionDocument) -> bytes:
    payload = doc.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


def count_requests(doc: CollectionDocument) -> int:
    return sum(len(folder.item) for folder in doc.item)


def summarize(
    doc: CollectionDocument,
    config: CollectionConfig,
    file_name: str,
    *,
    clock: Clock = _utc_now,
) -> Metadata:
    return Metadata(
        generated_at=isoformat_z(clock()),
        build_number=config.build_number,
        base_url=config.base_url,
        collection_name=config.collection_name,
        request_count=count_requests(doc),
        file_name=file_name,
    )


@dataclass(frozen=True)
class ArtifactPaths:
    collection: Path
    metadata: Path


@dataclass(frozen=True)
class GenerationResult:
    document: CollectionDocument
    metadata: Metadata
    paths: ArtifactPaths


def write_artifacts(
    doc: CollectionDocument,
    config: CollectionConfig,
    *,
    clock: Clock = _utc_now,
) -> tuple[ArtifactPaths, Metadata]:
    """Write the collection and its metadata into ``config.output_dir``.

    The directory is created when missing. I/O errors propagate.
    """
    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    collection_path = output_dir / COLLECTION_FILE_NAME
    collection_path.write_bytes(serialize(doc))
    logger.info("Wrote collection %r to %s", doc.info.name, collection_path)

    metadata = summarize(doc, config, str(collection_path), clock=clock)
    metadata_path = output_dir / METADATA_FILE_NAME
    metadata_path.write_bytes(
        json.dumps(metadata.model_dump(by_alias=True), indent=2, ensure_ascii=False).encode("utf-8")
    )
    logger.info("Wrote metadata (%d requests) to %s", metadata.request_count, metadata_path)

    return ArtifactPaths(collection=collection_path, metadata=metadata_path), metadata


def generate(
    config: CollectionConfig,
    profile: str | None = None,
    *,
    id_factory: Callable[[], str] = _new_id,
    clock: Clock = _utc_now,
) -> GenerationResult:
    doc = build(config, profile, id_factory=id_factory, clock=clock)
    paths, metadata = write_artifacts(doc, config, clock=clock)
    return GenerationResult(document=doc, metadata=metadata, paths=paths)
