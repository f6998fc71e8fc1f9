"""Core DeployService orchestration."""

import concurrent.futures
import time
from collections.abc import Callable

from ..ports import LoggerPort, StoragePort
from .config import AssetReleaseConfig
from .errors import AssetReleaseError
from .inventory import scan_local, scan_remote
from .models import RELEASE_METADATA_KEY, Action, ExecutionResult, Plan, PlanEntry
from .reconcile import reconcile


class DeployService:
    """Plans and executes a release deploy against one bucket."""

    def __init__(
        self,
        storage: StoragePort,
        logger: LoggerPort,
        config: AssetReleaseConfig,
    ):
        self.storage = storage
        self.logger = logger
        self.config = config

    def plan(self) -> Plan:
        """Scan both sides and reconcile them.

        The local scan and the bucket listing run concurrently.
        """
        config = self.config
        self.logger.info("Release", release=config.release)

        with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
            local_future = executor.submit(scan_local, config.source, config.pattern)
            remote_future = executor.submit(
                scan_remote, self.storage, config.bucket, self.logger, config.max_workers
            )
            local = local_future.result()
            self.logger.info(f"Found {len(local)} files", source=config.source)
            remote = remote_future.result()
            self.logger.info(f"Found {len(remote)} objects", bucket=config.bucket)

        plan = reconcile(local, remote, config)

        for entry in plan.by_action(Action.UPDATE):
            for reason in entry.reasons:
                self.logger.warning(f"{entry.key}: {reason}")
        for entry in plan.by_action(Action.KEEP):
            if entry.key in local:
                self.logger.debug(f"{entry.key}: up-to-date")

        return plan

    def execute(self, plan: Plan) -> ExecutionResult:
        """Apply a plan: uploads first, then metadata updates, then deletes.

        A failure on one key is recorded and never blocks the other keys.
        """
        result = ExecutionResult()

        uploads = plan.by_action(Action.UPLOAD)
        if uploads:
            self.logger.info("Uploading new files...", count=len(uploads))
            self._run(uploads, self._upload, result.uploaded, result)

        updates = plan.by_action(Action.UPDATE)
        if updates:
            self.logger.info("Updating files in-place...", count=len(updates))
            self._run(updates, self._update, result.updated, result)

        deletes = plan.by_action(Action.DELETE)
        if deletes:
            self.logger.info("Deleting remote files...", count=len(deletes))
            self._run(deletes, self._delete, result.deleted, result)

        self.logger.info(
            "Deploy complete",
            uploaded=len(result.uploaded),
            updated=len(result.updated),
            deleted=len(result.deleted),
            failed=result.failed_count,
        )
        return result

    def _run(
        self,
        entries: list[PlanEntry],
        action: Callable[[PlanEntry], None],
        done: list[str],
        result: ExecutionResult,
    ) -> None:
        workers = min(self.config.max_workers, len(entries))
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(action, entry): entry.key for entry in entries}
            for future in concurrent.futures.as_completed(futures):
                key = futures[future]
                try:
                    future.result()
                except (AssetReleaseError, OSError) as e:
                    result.errors[key] = str(e)
                    self.logger.error(f"Failed to process {key}: {e}")
                else:
                    done.append(key)
        done.sort()

    def _upload(self, entry: PlanEntry) -> None:
        file = entry.local
        if file is None:
            raise AssetReleaseError(f"Upload of {entry.key} has no local file")

        start = time.monotonic()
        self.logger.debug(f"Uploading {entry.key}...")
        self.storage.upload(
            f"{self.config.bucket}/{entry.key}",
            file.path,
            acl=self.config.acl,
            cache_control=self.config.cache_control,
            content_type=file.content_type,
            content_encoding=file.content_encoding,
            metadata={RELEASE_METADATA_KEY: str(self.config.release)},
        )
        self.logger.log_operation(
            op="upload", key=entry.key, durations={"total": time.monotonic() - start}
        )

    def _update(self, entry: PlanEntry) -> None:
        desired = entry.desired
        if desired is None:
            raise AssetReleaseError(f"Update of {entry.key} has no desired metadata")

        start = time.monotonic()
        self.logger.debug(f"Updating in-place: {entry.key}")
        self.storage.copy_in_place(
            f"{self.config.bucket}/{entry.key}",
            acl=self.config.acl,
            cache_control=desired.cache_control,
            content_type=desired.content_type,
            content_encoding=desired.content_encoding,
            metadata=dict(desired.metadata),
        )
        self.logger.log_operation(
            op="update", key=entry.key, durations={"total": time.monotonic() - start}
        )

    def _delete(self, entry: PlanEntry) -> None:
        start = time.monotonic()
        self.logger.debug(f"Delete {entry.key}...")
        self.storage.delete(f"{self.config.bucket}/{entry.key}")
        self.logger.log_operation(
            op="delete", key=entry.key, durations={"total": time.monotonic() - start}
        )
