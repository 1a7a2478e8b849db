import pytest

from contact.appender import get_appender
from contact.records import SubmissionRecord


@pytest.fixture
def submissions_file(tmp_path, settings):
    path = tmp_path / "form-submissions.csv"
    settings.CONTACT_SUBMISSIONS_FILE = path
    yield path
    get_appender(path).flush()


@pytest.fixture
def make_record():
    def factory(
        full_name="Ada Lovelace",
        email="ada@example.com",
        message="Hello",
        timestamp="2026-10-19T08:15:30.123Z",
    ):
        return SubmissionRecord(
            full_name=full_name, email=email, message=message, timestamp=timestamp
        )

    return factory
