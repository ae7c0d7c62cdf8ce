import pytest
from pydantic import ValidationError

from transcription_api.domain import JobStatus, PollPolicy


@pytest.mark.unit
class TestPollPolicy:
    def test_fixed_interval_by_default(self):
        policy = PollPolicy()

        assert [policy.interval_after(n) for n in (1, 2, 50)] == [1.0, 1.0, 1.0]

    def test_backoff_is_capped(self):
        policy = PollPolicy(interval_seconds=1.0, backoff_factor=2.0, max_interval_seconds=5.0)

        assert [policy.interval_after(n) for n in (1, 2, 3, 4, 5)] == [1.0, 2.0, 4.0, 5.0, 5.0]

    def test_cap_never_shortens_base_interval(self):
        policy = PollPolicy(interval_seconds=15.0, max_interval_seconds=10.0)

        assert policy.interval_after(1) == 15.0

    def test_requires_at_least_one_attempt(self):
        with pytest.raises(ValidationError):
            PollPolicy(max_attempts=0)


@pytest.mark.unit
def test_terminal_job_states():
    assert {s for s in JobStatus if s.is_terminal} == {JobStatus.COMPLETED, JobStatus.FAILED}
