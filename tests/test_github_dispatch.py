from unittest.mock import MagicMock

import pytest
import requests

from errors import UpstreamError, UpstreamUnreachable
from github_dispatch import build_dispatch_request, dispatch_url, trigger_workflow


def test_dispatch_url_strips_trailing_slash(settings):
    custom = settings.model_copy(update={"github_api_url": "https://ghe.example.com/api/v3/"})
    assert dispatch_url(custom) == ("https://ghe.example.com/api/v3/repos/DrRaSHed/farabi-mock"
                                    "/actions/workflows/apply_change.yml/dispatches")


def test_build_dispatch_request_passes_payload_through(settings):
    payload = {"file_no": "7", "service_price": 99.5, "urgent": True}
    dispatch_request = build_dispatch_request(payload, settings)
    assert dispatch_request.ref == "release"
    assert dispatch_request.model_dump() == {"ref": "release", "inputs": payload}


def test_trigger_workflow_uses_configured_timeout(settings, github_post):
    timed = settings.model_copy(update={"request_timeout": 5.0})
    trigger_workflow(build_dispatch_request({"a": "b"}, timed), timed)
    assert github_post.call_args.kwargs["timeout"] == 5.0


def test_trigger_workflow_accepts_any_2xx(settings, github_post):
    github_post.return_value = MagicMock(status_code=200, text="")
    assert trigger_workflow(build_dispatch_request({}, settings), settings).status_code == 200


def test_trigger_workflow_redirect_is_an_error(settings, github_post):
    github_post.return_value = MagicMock(status_code=301, text="moved")
    with pytest.raises(UpstreamError) as exc_info:
        trigger_workflow(build_dispatch_request({}, settings), settings)
    assert exc_info.value.upstream_status == 301
    assert exc_info.value.body == "moved"


def test_trigger_workflow_timeout(settings, github_post):
    github_post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(UpstreamUnreachable) as exc_info:
        trigger_workflow(build_dispatch_request({}, settings), settings)
    assert exc_info.value.status_code == 502
