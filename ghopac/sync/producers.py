# ghopac Target Producers
# Turn configured orgs and syncpoints into queued sync targets

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ghopac.config.schema import CloneProtocol, OrgConfig
from ghopac.github.client import DEFAULT_PAGE_SIZE, GitHubClient, GitHubError
from ghopac.sync.queue import WorkQueue
from ghopac.sync.target import SyncTarget

if TYPE_CHECKING:
    from ghopac.output.console import Console


@dataclass
class ProducerReport:
    """What a producer queued and how many problems it hit."""

    source: str
    emitted: int = 0
    warnings: int = 0
    pages: int = 0

    @property
    def ok(self) -> bool:
        return self.warnings == 0


def produce_org_targets(
    org: OrgConfig,
    client: GitHubClient,
    work: WorkQueue,
    console: "Console",
    *,
    protocol: CloneProtocol = CloneProtocol.SSH,
    per_page: int = DEFAULT_PAGE_SIZE,
) -> ProducerReport:
    """
    Queue a target for every repository of an organization.

    The org's base directory must already exist. Paging stops on the
    last page or on the first page that fails to load.

    Args:
        org: Organization entry from the configuration.
        client: Listing API client.
        work: Queue to push targets onto.
        console: Status log.
        protocol: Which clone URL to use as origin.
        per_page: Listing page size.

    Returns:
        ProducerReport for this org.
    """
    report = ProducerReport(source=f"org {org.org}")

    if not Path(org.path).exists():
        console.warning(f"Source directory {org.path} for org {org.org} does not exist, skipping.")
        report.warnings += 1
        return report

    try:
        for page in client.iter_org_pages(org.org, per_page=per_page):
            report.pages += 1
            for repository in page.repositories:
                work.put(SyncTarget.for_repository(org.path, repository.name, repository.origin(protocol)))
                report.emitted += 1
    except GitHubError as e:
        console.warning(f"Problem accessing org `{org.org}` repository list page {e.page}: {e.message}")
        report.warnings += 1
        return report

    console.info(f"Queued {report.emitted} repositories of org {org.org} from {report.pages} pages")
    return report


def produce_syncpoint_targets(syncpoints: list[str], work: WorkQueue, console: "Console") -> ProducerReport:
    """
    Queue a pull-only target for every existing syncpoint.

    Missing syncpoints are reported and skipped.
    """
    report = ProducerReport(source="syncpoints")

    for syncpoint in syncpoints:
        if Path(syncpoint).exists():
            work.put(SyncTarget.for_syncpoint(syncpoint))
            report.emitted += 1
        else:
            console.warning(f"Source directory {syncpoint} does not exist, skipping.")
            report.warnings += 1

    return report
