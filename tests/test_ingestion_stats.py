import dataclasses
from datetime import datetime, timezone

import pytest

from api.models.ingestion_models import KmsIngestionStats

STARTED = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_job(status="COMPLETE", **statistics):
    return {
        "ingestionJobId": "job-1",
        "status": status,
        "startedAt": STARTED,
        "updatedAt": datetime(2024, 1, 1, 12, 0, 50, tzinfo=timezone.utc),
        "statistics": statistics,
    }


def test_counters_from_job():
    stats = KmsIngestionStats.from_ingestion_job(
        make_job(
            numberOfDocumentsScanned=100,
            numberOfNewDocumentsIndexed=70,
            numberOfModifiedDocumentsIndexed=20,
            numberOfDocumentsFailed=10,
        )
    )
    assert stats.documents_processed == 100
    assert stats.documents_successful == 90
    assert stats.documents_failed == 10
    assert stats.processing_duration_seconds == 50
    assert stats.success_rate == pytest.approx(90.0)
    assert stats.processing_rate == pytest.approx(2.0)


def test_empty_job():
    stats = KmsIngestionStats.from_ingestion_job({"ingestionJobId": "job-1", "status": "STARTING"})
    assert stats.documents_processed == 0
    assert stats.processing_duration_seconds == 0
    assert stats.success_rate == 0.0
    assert stats.processing_rate == 0.0
    assert not stats.is_complete


@pytest.mark.parametrize(
    "status, complete, successful",
    [
        ("COMPLETE", True, True),
        ("complete", True, True),
        ("FAILED", True, False),
        ("STOPPED", True, False),
        ("IN_PROGRESS", False, False),
    ],
)
def test_status_flags(status, complete, successful):
    stats = KmsIngestionStats(job_id="job-1", status=status)
    assert stats.is_complete is complete
    assert stats.is_successful is successful


def test_immutable():
    stats = KmsIngestionStats(job_id="job-1", status="COMPLETE")
    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.status = "FAILED"


def test_to_dict_and_str():
    stats = KmsIngestionStats.from_ingestion_job(
        make_job(numberOfDocumentsScanned=3, numberOfNewDocumentsIndexed=1)
    )
    data = stats.to_dict()
    assert data["start_time"] == STARTED.isoformat()
    assert data["success_rate"] == 33.33
    assert data["is_successful"] is True
    assert "job_id='job-1'" in str(stats)
    assert "success_rate=33.33%" in str(stats)
