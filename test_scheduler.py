import pytest
import schedule

import scheduler


class FakeService:
    def __init__(self, result=("10/17/2026", 6), error=None):
        self.result = result
        self.error = error
        self.refreshes = 0

    def refresh(self, day=None):
        self.refreshes += 1
        if self.error:
            raise self.error
        return self.result


class StopLoop(Exception):
    pass


def test_warm_cache_refreshes_today(capsys):
    service = FakeService()

    scheduler.warm_cache(service)

    assert service.refreshes == 1
    assert "Cached 6 halls for 10/17/2026" in capsys.readouterr().out


def test_warm_cache_reports_failures_without_raising(capsys):
    service = FakeService(error=RuntimeError("site down"))

    scheduler.warm_cache(service)

    assert "site down" in capsys.readouterr().out


def test_run_scheduler_warms_then_schedules_daily(monkeypatch):
    def stop(seconds):
        raise StopLoop()

    monkeypatch.setattr(scheduler.time, "sleep", stop)
    service = FakeService()
    jobs = schedule.Scheduler()

    with pytest.raises(StopLoop):
        scheduler.run_scheduler(service, at="04:30", scheduler=jobs)

    assert service.refreshes == 1
    assert len(jobs.jobs) == 1
    assert jobs.jobs[0].unit == "days"
