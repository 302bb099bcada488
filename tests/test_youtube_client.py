from unittest.mock import MagicMock, patch

import httplib2
import pytest
from googleapiclient.errors import HttpError

from feed_pipeline.core.config import ConfigurationMissingError
from feed_pipeline.core.errors import UpstreamError
from feed_pipeline.core.youtube import YouTubeDataClient

from conftest import CHANNEL_ID, UPLOADS_ID, channel_response, playlist_response


@pytest.fixture
def service():
    return MagicMock()


@pytest.mark.parametrize("api_key", ["", "   ", None])
def test_missing_api_key_is_a_configuration_error(api_key):
    with pytest.raises(ConfigurationMissingError, match="YOUTUBE_API_KEY"):
        YouTubeDataClient(api_key)


async def test_channel_by_id(service):
    service.channels.return_value.list.return_value.execute.return_value = channel_response()
    client = YouTubeDataClient("key", service=service)

    response = await client.channel_by_id(CHANNEL_ID)

    service.channels.return_value.list.assert_called_once_with(part="contentDetails", id=CHANNEL_ID)
    assert response["items"][0]["contentDetails"]["relatedPlaylists"]["uploads"] == UPLOADS_ID


async def test_channel_by_username(service):
    service.channels.return_value.list.return_value.execute.return_value = channel_response()
    client = YouTubeDataClient("key", service=service)

    await client.channel_by_username("JFlaMusic")

    service.channels.return_value.list.assert_called_once_with(part="contentDetails", forUsername="JFlaMusic")


async def test_playlist_items_requests_first_page_of_snippets(service):
    service.playlistItems.return_value.list.return_value.execute.return_value = playlist_response()
    client = YouTubeDataClient("key", service=service)

    response = await client.playlist_items(UPLOADS_ID)

    service.playlistItems.return_value.list.assert_called_once_with(
        part="snippet", playlistId=UPLOADS_ID, maxResults=50
    )
    assert response["items"] == []


async def test_http_error_becomes_upstream_error(service):
    resp = MagicMock(status=403, reason="Forbidden")
    error = HttpError(resp, b'{"error": {"message": "quotaExceeded"}}')
    service.channels.return_value.list.return_value.execute.side_effect = error
    client = YouTubeDataClient("key", service=service)

    with pytest.raises(UpstreamError) as excinfo:
        await client.channel_by_id(CHANNEL_ID)

    assert excinfo.value.__cause__ is error


@pytest.mark.parametrize("error", [
    httplib2.ServerNotFoundError("Unable to find the server at youtube.googleapis.com"),
    TimeoutError("timed out"),
    ConnectionResetError("connection reset by peer"),
])
async def test_transport_error_becomes_upstream_error(service, error):
    service.playlistItems.return_value.list.return_value.execute.side_effect = error
    client = YouTubeDataClient("key", service=service)

    with pytest.raises(UpstreamError) as excinfo:
        await client.playlist_items(UPLOADS_ID)

    assert excinfo.value.__cause__ is error


def test_discovery_failure_becomes_upstream_error():
    error = httplib2.ServerNotFoundError("Unable to find the server at youtube.googleapis.com")

    with patch("feed_pipeline.core.youtube.youtube_client.build", side_effect=error):
        with pytest.raises(UpstreamError) as excinfo:
            YouTubeDataClient("key")

    assert excinfo.value.__cause__ is error
