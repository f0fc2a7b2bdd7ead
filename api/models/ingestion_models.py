from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

TERMINAL_STATUSES = ("COMPLETE", "FAILED", "STOPPED")


@dataclass(frozen=True)
class KmsIngestionStats:
    """Point-in-time snapshot of an ingestion job and its document counters."""

    job_id: str
    status: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    statistics: Dict[str, Any] = field(default_factory=dict)
    documents_processed: int = 0
    documents_successful: int = 0
    documents_failed: int = 0

    @classmethod
    def from_ingestion_job(cls, job: Dict[str, Any]) -> "KmsIngestionStats":
        """Build stats from the ``ingestionJob`` member of a get_ingestion_job response."""
        statistics = job.get("statistics") or {}
        return cls(
            job_id=job.get("ingestionJobId"),
            status=str(job.get("status", "")),
            start_time=job.get("startedAt"),
            end_time=job.get("updatedAt"),
            statistics=statistics,
            documents_processed=statistics.get("numberOfDocumentsScanned", 0),
            documents_successful=statistics.get("numberOfNewDocumentsIndexed", 0)
            + statistics.get("numberOfModifiedDocumentsIndexed", 0),
            documents_failed=statistics.get("numberOfDocumentsFailed", 0),
        )

    @property
    def processing_duration_seconds(self) -> int:
        if self.start_time is not None and self.end_time is not None:
            return int(self.end_time.timestamp()) - int(self.start_time.timestamp())
        return 0

    @property
    def success_rate(self) -> float:
        """Percentage of processed documents that were indexed."""
        if self.documents_processed > 0:
            return self.documents_successful / self.documents_processed * 100.0
        return 0.0

    @property
    def processing_rate(self) -> float:
        """Documents processed per second."""
        duration = self.processing_duration_seconds
        if duration > 0:
            return self.documents_processed / duration
        return 0.0

    @property
    def is_complete(self) -> bool:
        return self.status.upper() in TERMINAL_STATUSES

    @property
    def is_successful(self) -> bool:
        return self.status.upper() == "COMPLETE"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "job_id": self.job_id,
            "status": self.status,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "documents_processed": self.documents_processed,
            "documents_successful": self.documents_successful,
            "documents_failed": self.documents_failed,
            "processing_duration_seconds": self.processing_duration_seconds,
            "success_rate": round(self.success_rate, 2),
            "processing_rate": round(self.processing_rate, 2),
            "is_complete": self.is_complete,
            "is_successful": self.is_successful,
        }

    def __str__(self) -> str:
        return (
            f"KmsIngestionStats(job_id='{self.job_id}', status='{self.status}', "
            f"processed={self.documents_processed}, successful={self.documents_successful}, "
            f"failed={self.documents_failed}, success_rate={self.success_rate:.2f}%)"
        )
