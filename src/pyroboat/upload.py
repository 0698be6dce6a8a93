"""Upload manager with concurrent asset uploads (async-only).

All uploads share one Client, so a token refreshed by one upload is used
by every upload that starts after it.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from tqdm import tqdm

from pyroboat.client import Client
from pyroboat.errors import RoboatError
from pyroboat.models.ide import NewStudioAsset

logger = logging.getLogger(__name__)


@dataclass
class UploadTask:
    """A single upload task."""

    asset: NewStudioAsset
    label: str = ""

    def __post_init__(self):
        """Default the label to the asset name."""
        if not self.label:
            self.label = self.asset.name


@dataclass
class UploadResult:
    """Outcome of one UploadTask: either ``asset_id`` or ``error`` is set."""

    task: UploadTask
    asset_id: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.asset_id is not None


class UploadManager:
    """Manages concurrent asset uploads with progress tracking (async-only).

    Features:
    - Concurrent uploads through one shared Client
    - asyncio.Semaphore for concurrency control
    - Progress tracking with tqdm
    - Per-task results; one failed upload does not stop the others
    """

    def __init__(
        self,
        client: Client,
        max_workers: Optional[int] = None,
        show_progress: bool = True,
    ):
        """Initialize upload manager.

        Args:
            client: Client used for every upload
            max_workers: Maximum number of concurrent uploads (defaults to config)
            show_progress: Whether to show progress bar
        """
        self.client = client
        if max_workers is None:
            max_workers = client.config.max_concurrent_tasks
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1: {max_workers}")
        self.max_workers = max_workers
        self.show_progress = show_progress and client.config.show_progress
        self.tasks: List[UploadTask] = []

    def add_task(self, task: UploadTask):
        self.tasks.append(task)

    def add_tasks(self, tasks: List[UploadTask]):
        self.tasks.extend(tasks)

    async def execute(
        self,
        callback: Optional[Callable[[UploadResult], None]] = None
    ) -> List[UploadResult]:
        """Execute all queued upload tasks concurrently.

        Args:
            callback: Optional callback called with each UploadResult as it
                     completes

        Returns:
            UploadResults in the order the tasks were queued
        """
        if not self.tasks:
            logger.warning("No tasks to execute")
            return []

        tasks = list(self.tasks)
        results: List[Optional[UploadResult]] = [None] * len(tasks)
        successful = 0
        failed = 0

        pbar = None
        if self.show_progress:
            pbar = tqdm(total=len(tasks), desc="Uploading", unit="asset")

        try:
            semaphore = asyncio.Semaphore(self.max_workers)

            async def upload_with_semaphore(index: int, task: UploadTask):
                async with semaphore:
                    return index, await self._upload_single(task)

            pending = [upload_with_semaphore(i, task) for i, task in enumerate(tasks)]

            for coro in asyncio.as_completed(pending):
                index, result = await coro
                results[index] = result
                if result.success:
                    successful += 1
                else:
                    failed += 1

                if callback:
                    callback(result)

                if pbar:
                    pbar.update(1)
                    pbar.set_postfix({"success": successful, "failed": failed})

        finally:
            if pbar:
                pbar.close()

        self.tasks = []

        logger.info(f"Upload complete: {successful} successful, {failed} failed")
        return results

    async def _upload_single(self, task: UploadTask) -> UploadResult:
        try:
            asset_id = await self.client.upload_studio_asset(task.asset)
        except RoboatError as e:
            logger.error(f"Failed to upload {task.label}: {e}")
            return UploadResult(task=task, error=e)
        except Exception as e:
            logger.error(f"Upload task {task.label} failed with exception: {e!r}", exc_info=True)
            return UploadResult(task=task, error=e)

        logger.debug(f"Uploaded {task.label} -> {asset_id}")
        return UploadResult(task=task, asset_id=asset_id)

    def clear(self):
        """Clear all queued tasks."""
        self.tasks = []

    def __len__(self):
        """Return number of queued tasks."""
        return len(self.tasks)
