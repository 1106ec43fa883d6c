"""
Tests for the HTTP transport in PluginUpdater Client

The requests session is replaced with a mock; no network access.
"""

import sys
from pathlib import Path
from unittest import mock

import pytest
import requests

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api import UpdateServerAPI, TransportResponse
from exceptions import UpdateTransportError, PluginUpdaterError


def make_api(**request_kwargs):
    session = mock.Mock(spec=requests.Session)
    session.request.configure_mock(**request_kwargs)
    return UpdateServerAPI(verify_ssl=False, session=session), session


def test_send_returns_status_and_body():
    """Test responses are returned unchanged"""
    response = mock.Mock(status_code=404, text='{"error": "nope", "code": 404}')
    api, session = make_api(return_value=response)

    result = api.send("https://example.com/check-update", headers={"Accept": "application/json"},
                      body='{"action": "version"}', timeout=15)

    assert result == TransportResponse(status_code=404, body='{"error": "nope", "code": 404}')
    session.request.assert_called_once_with(
        "POST",
        "https://example.com/check-update",
        headers={"Accept": "application/json"},
        data=b'{"action": "version"}',
        verify=False,
        timeout=15
    )


@pytest.mark.parametrize("error", [
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.Timeout("slow"),
    requests.exceptions.InvalidURL("bad"),
])
def test_network_errors_raise_transport_error(error):
    """Test requests exceptions become UpdateTransportError"""
    api, _ = make_api(side_effect=error)

    with pytest.raises(UpdateTransportError) as exc_info:
        api.send("https://example.com/check-update", body="{}")

    assert isinstance(exc_info.value, PluginUpdaterError)


def test_timeout_message_names_timeout():
    """Test timeouts are reported as such"""
    api, _ = make_api(side_effect=requests.exceptions.ReadTimeout("slow"))

    with pytest.raises(UpdateTransportError, match="timed out after 15s"):
        api.send("https://example.com/check-update", timeout=15)


def test_close_closes_session():
    """Test close releases the session"""
    api, session = make_api()
    api.close()
    session.close.assert_called_once()
