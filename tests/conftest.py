import pytest

from domain.artist import Artist
from domain.booth import BoothRegistry
from tests.constants import ARTIST_NAME, ARTIST_UID, BIG_BOOTH_ID, SMALL_BOOTH_ID
from tests.helpers.recording_sink import RecordingSink


@pytest.fixture(scope="function")
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(scope="function")
def registry() -> BoothRegistry:
    return BoothRegistry()


@pytest.fixture(scope="function")
def small_booth_artist(sink: RecordingSink) -> Artist:
    return Artist(ARTIST_NAME, ARTIST_UID, SMALL_BOOTH_ID, sink=sink)


@pytest.fixture(scope="function")
def big_booth_artist(sink: RecordingSink) -> Artist:
    return Artist("NotNamie", "86232", BIG_BOOTH_ID, sink=sink)
