import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.db.models import Base
from app.main import app


API = "/api/v1"


@pytest.fixture
def client():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()


def create_shift(client, name, start, end) -> int:
    res = client.post(f"{API}/shifts", json={"name": name, "start_time": start, "end_time": end})
    assert res.status_code == 201
    return res.json()["id"]


@pytest.fixture
def shift_ids(client):
    return {
        "early": create_shift(client, "Early", "06:00", "14:00"),
        "late": create_shift(client, "Late", "14:00", "22:00"),
        "night": create_shift(client, "Night", "22:00", "06:00"),
    }


class TestShiftRoutes:
    def test_create_returns_derived_fields(self, client):
        res = client.post(f"{API}/shifts", json={"name": "Night", "start_time": "22:00", "end_time": "06:00"})

        assert res.status_code == 201
        body = res.json()
        assert body["duration"] == 8.0
        assert body["is_overnight"] is True
        assert body["is_active"] is True

    def test_duplicate_name_conflict(self, client, shift_ids):
        res = client.post(f"{API}/shifts", json={"name": "Early", "start_time": "07:00", "end_time": "15:00"})
        assert res.status_code == 409

    def test_blank_name_rejected(self, client):
        res = client.post(f"{API}/shifts", json={"name": "   ", "start_time": "07:00", "end_time": "15:00"})
        assert res.status_code == 422

    def test_soft_delete_hides_from_list(self, client, shift_ids):
        assert client.delete(f"{API}/shifts/{shift_ids['late']}").status_code == 204

        names = [s["name"] for s in client.get(f"{API}/shifts").json()]
        assert names == ["Early", "Night"]
        all_names = [s["name"] for s in client.get(f"{API}/shifts", params={"include_inactive": True}).json()]
        assert "Late" in all_names

    def test_quick_shifts(self, client, shift_ids):
        res = client.get(f"{API}/shifts/quick", params={"limit": 2})
        assert [s["name"] for s in res.json()] == ["Early", "Late"]

    def test_update_and_missing(self, client, shift_ids):
        res = client.put(f"{API}/shifts/{shift_ids['early']}", json={"end_time": "15:00"})
        assert res.status_code == 200
        assert res.json()["duration"] == 9.0

        assert client.get(f"{API}/shifts/9999").status_code == 404
        assert client.put(f"{API}/shifts/9999", json={"name": "X"}).status_code == 404

    def test_rename_with_padding_to_taken_name_conflicts(self, client, shift_ids):
        res = client.put(f"{API}/shifts/{shift_ids['late']}", json={"name": " Early "})
        assert res.status_code == 409

        names = [s["name"] for s in client.get(f"{API}/shifts").json()]
        assert names.count("Early") == 1
        assert "Late" in names

    @pytest.mark.parametrize("body", [
        {"name": " "},
        {"name": None},
        {"start_time": None},
        {"end_time": None},
        {"color": None},
    ])
    def test_invalid_update_rejected_without_writing(self, client, shift_ids, body):
        res = client.put(f"{API}/shifts/{shift_ids['early']}", json=body)
        assert res.status_code == 422

        shift = client.get(f"{API}/shifts/{shift_ids['early']}").json()
        assert shift["name"] == "Early"
        assert shift["start_time"] == "06:00:00"


class TestScheduleRoutes:
    def test_put_get_delete_day(self, client, shift_ids):
        res = client.put(
            f"{API}/schedules/2025-03-03",
            json={"shift_id": shift_ids["night"], "note": "cover", "actual_start_time": "21:45", "actual_end_time": "06:00"},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["shift"]["name"] == "Night"
        assert body["shift"]["duration"] == 8.0
        assert body["shift"]["time_range_text"] == "22:00 - 06:00"
        assert body["is_checked_in"] is True
        assert body["actual_work_hours"] == 8.25

        assert client.get(f"{API}/schedules/2025-03-03").json()["note"] == "cover"
        assert client.delete(f"{API}/schedules/2025-03-03").status_code == 204
        assert client.get(f"{API}/schedules/2025-03-03").status_code == 404
        assert client.delete(f"{API}/schedules/2025-03-03").status_code == 404

    def test_put_unknown_shift(self, client):
        res = client.put(f"{API}/schedules/2025-03-03", json={"shift_id": 404})
        assert res.status_code == 404

    def test_list_requires_ordered_range(self, client):
        res = client.get(f"{API}/schedules", params={"start_date": "2025-03-09", "end_date": "2025-03-01"})
        assert res.status_code == 422

    def test_counts_and_clear_all(self, client, shift_ids):
        client.put(f"{API}/schedules/2025-03-03", json={"shift_id": shift_ids["early"]})

        assert client.get(f"{API}/schedules/counts").json() == {"shifts": 3, "schedules": 1}
        assert client.delete(f"{API}/schedules/all").status_code == 204
        assert client.get(f"{API}/schedules/counts").json() == {"shifts": 0, "schedules": 0}


class TestPatternRoutes:
    def test_rotation_then_statistics(self, client, shift_ids):
        payload = {
            "type": "rotation",
            "start_date": "2025-03-01",
            "end_date": "2025-03-10",
            "shift_ids": [shift_ids["early"], shift_ids["late"], shift_ids["night"]],
            "rest_days": 2,
        }
        res = client.post(f"{API}/patterns/apply", json=payload)

        assert res.status_code == 200
        assert res.json()["written"] == 6
        assert {s["reason"] for s in res.json()["skipped"]} == {"REST"}

        stats = client.get(
            f"{API}/statistics", params={"start_date": "2025-03-01", "end_date": "2025-03-10"},
        ).json()
        assert stats["work_days"] == 6
        assert stats["rest_days"] == 4
        assert stats["total_hours"] == 48.0
        assert stats["average_hours_per_work_day"] == 8.0

    def test_cycle_reports_unresolved_ids(self, client, shift_ids):
        payload = {
            "type": "cycle",
            "start_date": "2025-03-01",
            "end_date": "2025-03-04",
            "cycle_days": 2,
            "cycle_pattern": {"0": shift_ids["early"], "1": 999},
        }
        body = client.post(f"{API}/patterns/apply", json=payload).json()

        assert body["written"] == 2
        assert [s["shift_id"] for s in body["skipped"]] == [999, 999]
        assert body["skipped"][0]["reason"] == "SHIFT_NOT_FOUND"

    def test_weekly_pattern(self, client, shift_ids):
        # 2025-03-05 is a Wednesday
        payload = {
            "type": "weekly",
            "start_date": "2025-03-05",
            "end_date": "2025-03-11",
            "week_pattern": {"0": shift_ids["early"]},
        }
        assert client.post(f"{API}/patterns/apply", json=payload).json()["written"] == 1

        rows = client.get(f"{API}/schedules", params={"start_date": "2025-03-05", "end_date": "2025-03-11"}).json()
        assert [r["date"] for r in rows] == ["2025-03-10"]

    def test_single_missing_shift_is_404(self, client):
        res = client.post(f"{API}/patterns/apply", json={"type": "single", "date": "2025-03-01", "shift_id": 5})
        assert res.status_code == 404

    def test_invalid_cycle_is_422(self, client, shift_ids):
        payload = {
            "type": "cycle",
            "start_date": "2025-03-01",
            "end_date": "2025-03-04",
            "cycle_days": 1,
            "cycle_pattern": {"0": shift_ids["early"]},
        }
        assert client.post(f"{API}/patterns/apply", json=payload).status_code == 422

    def test_unknown_type_is_422(self, client):
        res = client.post(f"{API}/patterns/apply", json={"type": "fortnightly"})
        assert res.status_code == 422


class TestStatisticsAndExports:
    def test_monthly_and_yearly(self, client, shift_ids):
        client.put(f"{API}/schedules/2024-02-29", json={"shift_id": shift_ids["night"]})

        monthly = client.get(f"{API}/statistics/monthly/2024/2").json()
        assert monthly["calendar_days"] == 29
        assert monthly["shift_distribution"] == {"Night": 1}

        yearly = client.get(f"{API}/statistics/yearly/2024").json()
        assert yearly["calendar_days"] == 366
        assert client.get(f"{API}/statistics/monthly/2024/13").status_code == 422

    def test_weekly_covers_monday_to_sunday(self, client, shift_ids):
        # Sunday 2025-03-02 belongs to the previous week
        for day in ["2025-03-02", "2025-03-03", "2025-03-09", "2025-03-10"]:
            client.put(f"{API}/schedules/{day}", json={"shift_id": shift_ids["early"]})

        weekly = client.get(f"{API}/statistics/weekly/2025-03-05").json()
        assert weekly["start_date"] == "2025-03-03"
        assert weekly["end_date"] == "2025-03-09"
        assert weekly["work_days"] == 2
        assert weekly["rest_days"] == 5

    def test_exports(self, client, shift_ids):
        client.put(f"{API}/schedules/2025-03-03", json={"shift_id": shift_ids["early"]})
        params = {"start_date": "2025-03-01", "end_date": "2025-03-31"}

        csv_res = client.get(f"{API}/exports/csv", params=params)
        assert csv_res.headers["content-type"].startswith("text/csv")
        assert "2025-03-03,Monday,Early,06:00,14:00,8.0" in csv_res.text

        doc = client.get(f"{API}/exports/json", params=params).json()
        assert doc["statistics"]["work_days"] == 1
        assert doc["statistics"]["rest_days"] == 30
        assert doc["statistics"]["calendar_days"] == 31

        report = client.get(f"{API}/exports/report", params=params).text
        assert "Early: 1 days (100.0%)" in report


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
