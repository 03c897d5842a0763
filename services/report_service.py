"""
Report service for emailing digests of recent signups.

The report generator reads the most recent rows of the signup store and
sends them to the report recipient as an HTML table. It keeps no record of
what was already reported, so consecutive reports can repeat rows.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from services.newsletter_service import NewsletterService
from services.service_constants import (
    DEFAULT_REPORT_LABEL,
    DEFAULT_REPORT_LIMIT,
    MESSAGE_NO_NEW_SIGNUPS,
    TEST_REPORT_LABEL,
    TEST_REPORT_ROWS,
    TEST_REPORT_SUBJECT_TEMPLATE,
)
from services.signup_store import SignupStore

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    success: bool = True
    records: List[Dict[str, Any]] = field(default_factory=list)
    report: Optional[str] = None
    message: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'message': self.message,
            'count': len(self.records),
            'records': self.records,
        }


class ReportService:
    """Builds and sends signup digests."""

    def __init__(self, store: SignupStore, notifier: NewsletterService,
                 limit: int = DEFAULT_REPORT_LIMIT):
        self.store = store
        self.notifier = notifier
        self.limit = limit

    def generate(self, label: str = DEFAULT_REPORT_LABEL) -> ReportResult:
        """
        Send a digest of the most recent signups.

        Args:
            label: Report title, used in the heading and subject

        Returns:
            ReportResult with the reported rows and the rendered HTML, or an
            empty result when there is nothing to report

        Raises:
            DeliveryError: If the digest email could not be sent
        """
        logger.info("Generating %s", label)
        records = self.store.read_recent(self.limit)
        if not records:
            logger.info("No new signups to report")
            return ReportResult(message=MESSAGE_NO_NEW_SIGNUPS)

        report = self.notifier.send_digest(records, label)
        self.mark_reported(records)
        return ReportResult(
            records=records,
            report=report,
            message=f"{label} sent with {len(records)} signups",
        )

    def mark_reported(self, records: List[Dict[str, Any]]) -> None:
        # Rows are not flagged in the store; the next report may include them again.
        logger.info("Reported %d signups (no reported-state is kept)", len(records))

    def send_test_report(self) -> ReportResult:
        """
        Send a digest built from fixed sample rows to the report recipient.

        Raises:
            DeliveryError: If the digest email could not be sent
        """
        logger.info("Sending test report to %s", self.notifier.report_recipient)
        records = [dict(row) for row in TEST_REPORT_ROWS]
        report = self.notifier.send_digest(
            records,
            TEST_REPORT_LABEL,
            subject=TEST_REPORT_SUBJECT_TEMPLATE.format(brand=self.notifier.brand_name),
        )
        return ReportResult(
            records=records,
            report=report,
            message=f"Test report sent to {self.notifier.report_recipient}",
        )
