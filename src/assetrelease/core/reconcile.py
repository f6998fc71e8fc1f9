"""Reconciliation of local files against remote objects."""

from .config import AssetReleaseConfig
from .models import (
    RELEASE_METADATA_KEY,
    Action,
    LocalFile,
    Plan,
    PlanEntry,
    RemoteObject,
)
from .retention import is_evictable


def reconcile(
    local: dict[str, LocalFile],
    remote: dict[str, RemoteObject],
    config: AssetReleaseConfig,
) -> Plan:
    """Compute the execution plan for one deploy.

    Keys found locally are uploaded, refreshed in place or kept. Keys found
    only remotely are deleted once their release leaves the retention window,
    and kept otherwise. The result holds every key of both inventories once.

    This performs no I/O and never raises on valid input; the same inputs
    always produce the same plan.
    """
    plan = Plan(release=config.release)

    for key, file in local.items():
        plan.entries[key] = _plan_local(key, file, remote.get(key), config)

    for key, obj in remote.items():
        if key in local:
            continue
        plan.entries[key] = _plan_orphan(key, obj, config)

    return plan


def _plan_local(
    key: str,
    file: LocalFile,
    obj: RemoteObject | None,
    config: AssetReleaseConfig,
) -> PlanEntry:
    if config.force:
        return PlanEntry(key=key, action=Action.UPLOAD, local=file)

    if obj is None:
        if config.deploy or config.dry_run:
            return PlanEntry(key=key, action=Action.UPLOAD, local=file)
        return PlanEntry(key=key, action=Action.SKIP, local=file)

    desired, reasons = _merge_metadata(file, obj, config)
    if reasons:
        return PlanEntry(key=key, action=Action.UPDATE, desired=desired, reasons=tuple(reasons))
    return PlanEntry(key=key, action=Action.KEEP)


def _plan_orphan(key: str, obj: RemoteObject, config: AssetReleaseConfig) -> PlanEntry:
    if (config.clean or config.dry_run) and is_evictable(obj.release, config.release, config.keep):
        return PlanEntry(key=key, action=Action.DELETE)
    return PlanEntry(key=key, action=Action.KEEP)


def _merge_metadata(
    file: LocalFile,
    obj: RemoteObject,
    config: AssetReleaseConfig,
) -> tuple[RemoteObject, list[str]]:
    """Build the desired remote object and the reasons it differs from ``obj``.

    An empty reason list means the remote object is up to date.
    """
    reasons: list[str] = []

    if obj.cache_control is None:
        reasons.append("Missing Cache-Control")
    elif obj.cache_control != config.cache_control:
        reasons.append(
            f"Wrong Cache-Control, expected: {config.cache_control}, got: {obj.cache_control}"
        )

    content_type = obj.content_type
    if file.content_type and file.content_type != obj.content_type:
        if obj.content_type is None:
            reasons.append(f"Missing Content-Type: {file.content_type}")
        else:
            reasons.append(
                f"Wrong Content-Type, expected {file.content_type}, got {obj.content_type}"
            )
        content_type = file.content_type

    content_encoding = obj.content_encoding
    if file.content_encoding and file.content_encoding != obj.content_encoding:
        if obj.content_encoding is None:
            reasons.append(f"Missing Content-Encoding: {file.content_encoding}")
        else:
            reasons.append(
                f"Wrong Content-Encoding, expected {file.content_encoding}, "
                f"got {obj.content_encoding}"
            )
        content_encoding = file.content_encoding

    tag = obj.release_tag
    if tag is None:
        reasons.append("Missing release metadata")
    elif obj.release != config.release and not is_evictable(
        obj.release, config.release, config.keep
    ):
        reasons.append(f"Update release from {tag} to {config.release}")

    metadata = {k: v for k, v in obj.metadata.items() if k.lower() != RELEASE_METADATA_KEY}
    metadata[RELEASE_METADATA_KEY] = str(config.release)

    desired = RemoteObject(
        key=obj.key,
        cache_control=config.cache_control,
        content_type=content_type,
        content_encoding=content_encoding,
        metadata=metadata,
    )
    return desired, reasons
