from __future__ import annotations

import json
from pathlib import Path

from recruitdesk.container import create_container
from recruitdesk.storage import AuditLogger


def test_container_service_writes_audit_log(tmp_path: Path) -> None:
    audit_path = tmp_path / "audit.jsonl"

    container = create_container(
        settings={"candidates": {"seed": 3}},
        audit_logger=AuditLogger(audit_path),
    )
    service = container.service()

    vacancy_id = service.create_vacancy("Courier", "Deliveries", "2026-11-01", "ops@example.com")
    service.upload([f"driver-{i}.pdf" for i in range(10)], vacancy_id=vacancy_id)
    service.upload(["walk-in.pdf"])
    service.shortlist(vacancy_id)
    service.shortlist()

    entries = [
        json.loads(line)
        for line in audit_path.read_text(encoding="utf-8").strip().splitlines()
    ]
    assert [entry["scope"] for entry in entries] == ["vacancy", "pool"]
    assert entries[0]["shortlisted_count"] == 2
    assert entries[0]["rejected_count"] == 8
    assert entries[1]["vacancy_id"] is None
    assert entries[1]["statuses"] == [{"name": "walk-in", "status": "Rejected"}]
