# ghopac Sync Module
# Work distribution across a bounded worker pool

from ghopac.sync.engine import SyncEngine, SyncResult, aggregate_outcome
from ghopac.sync.producers import ProducerReport, produce_org_targets, produce_syncpoint_targets
from ghopac.sync.queue import QueueClosedError, WorkQueue
from ghopac.sync.target import SyncTarget
from ghopac.sync.worker import fold_outcomes, run_worker, sync_target

__all__ = [
    "SyncTarget",
    "WorkQueue",
    "QueueClosedError",
    "ProducerReport",
    "produce_org_targets",
    "produce_syncpoint_targets",
    "fold_outcomes",
    "sync_target",
    "run_worker",
    "SyncEngine",
    "SyncResult",
    "aggregate_outcome",
]
