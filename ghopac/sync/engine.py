# ghopac Sync Engine
# Runs producers and a bounded worker pool, then folds every outcome

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ghopac.config.schema import GhopacConfig
from ghopac.git.backend import GitBackend, SubprocessGit
from ghopac.github.client import DEFAULT_PAGE_SIZE, GitHubClient
from ghopac.sync.producers import ProducerReport, produce_org_targets, produce_syncpoint_targets
from ghopac.sync.queue import DEFAULT_BUFFER_SIZE, WorkQueue
from ghopac.sync.worker import fold_outcomes, run_worker

if TYPE_CHECKING:
    from ghopac.output.console import Console


@dataclass
class SyncResult:
    """Result of a complete sync run."""

    success: bool
    workers: int = 0
    targets_queued: int = 0
    producer_reports: list[ProducerReport] = field(default_factory=list)
    worker_outcomes: list[bool] = field(default_factory=list)

    @property
    def producer_warnings(self) -> int:
        return sum(report.warnings for report in self.producer_reports)

    @property
    def failed_workers(self) -> int:
        return sum(1 for outcome in self.worker_outcomes if not outcome)

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 when everything succeeded, 1 otherwise."""
        return 0 if self.success else 1


def aggregate_outcome(producer_reports: Iterable[ProducerReport], worker_outcomes: Iterable[bool]) -> bool:
    """
    Fold producer checks and worker verdicts into the run verdict.

    True only when no producer reported a warning and every worker
    succeeded.
    """
    producers_ok = fold_outcomes(report.ok for report in producer_reports)
    return fold_outcomes([producers_ok, fold_outcomes(worker_outcomes)])


class SyncEngine:
    """
    Synchronization engine.

    Producers run on the calling thread and feed a shared queue while
    the worker pool drains it.
    """

    def __init__(
        self,
        config: GhopacConfig,
        console: "Console",
        *,
        git: Optional[GitBackend] = None,
        client: Optional[GitHubClient] = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        per_page: int = DEFAULT_PAGE_SIZE,
    ):
        """
        Initialize sync engine.

        Args:
            config: ghopac configuration.
            console: Status log shared by producers and workers.
            git: Clone/pull backend (runs git if not provided).
            client: Listing client (created from config on first use if not provided).
            buffer_size: Capacity of the work queue.
            per_page: Listing page size.
        """
        self.config = config
        self.console = console
        self.git = git or SubprocessGit()
        self.buffer_size = buffer_size
        self.per_page = per_page
        self._client = client

    @property
    def client(self) -> GitHubClient:
        if self._client is None:
            self._client = GitHubClient(self.config.github_access_token, api_url=self.config.api_url)
        return self._client

    def produce(self, work: WorkQueue) -> list[ProducerReport]:
        """Run every producer to completion, pushing targets onto work."""
        reports = [
            produce_org_targets(
                org,
                self.client,
                work,
                self.console,
                protocol=self.config.clone_protocol,
                per_page=self.per_page,
            )
            for org in self.config.orgs
        ]
        reports.append(produce_syncpoint_targets(self.config.syncpoints, work, self.console))
        return reports

    def run(self) -> SyncResult:
        """
        Synchronize every configured org repository and syncpoint.

        A hung git call blocks its worker, and therefore this call,
        indefinitely.

        Returns:
            SyncResult whose success is the aggregate outcome.
        """
        workers = self.config.get_concurrency()
        work = WorkQueue(self.buffer_size)
        self.console.info(f"Syncing with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ghopac-worker") as pool:
            slots = [pool.submit(run_worker, work, self.git, self.console) for _ in range(workers)]
            try:
                reports = self.produce(work)
            finally:
                work.close()
            outcomes = [slot.result() for slot in slots]

        return SyncResult(
            success=aggregate_outcome(reports, outcomes),
            workers=workers,
            targets_queued=work.put_count,
            producer_reports=reports,
            worker_outcomes=outcomes,
        )
