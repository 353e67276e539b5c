# github_dispatch.py triggers the GitHub Actions workflow_dispatch event.

import logging
from typing import Any, Dict

import requests

from config import Settings
from errors import UpstreamError, UpstreamUnreachable
from models.dispatch_request import DispatchRequest

logger = logging.getLogger(__name__)

USER_AGENT = "farabi-mock-worker"


def build_dispatch_request(payload: Dict[str, Any], settings: Settings) -> DispatchRequest:
    return DispatchRequest(ref=settings.ref, inputs=payload)


def dispatch_url(settings: Settings) -> str:
    base = settings.github_api_url.rstrip("/")
    return (f"{base}/repos/{settings.gh_owner}/{settings.gh_repo}"
            f"/actions/workflows/{settings.workflow_file}/dispatches")


def dispatch_headers(settings: Settings) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.gh_token}",
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
        "Content-Type": "application/json",
    }


def trigger_workflow(dispatch_request: DispatchRequest, settings: Settings):
    """
    POST the dispatch request to GitHub, exactly once.

    Raises UpstreamUnreachable when the request cannot be completed and
    UpstreamError when GitHub answers with a non-2xx status.
    """
    url = dispatch_url(settings)
    logger.info(f"Dispatching workflow '{settings.workflow_file}' on ref '{dispatch_request.ref}'")

    try:
        response = requests.post(
            url,
            headers=dispatch_headers(settings),
            json=dispatch_request.model_dump(),
            timeout=settings.request_timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Exception while calling GitHub API: {e}")
        raise UpstreamUnreachable(str(e))

    if not 200 <= response.status_code < 300:
        logger.error(f"GitHub API error. Code: {response.status_code}, Resp: {response.text}")
        raise UpstreamError(response.status_code, response.text)

    logger.info(f"Workflow dispatched successfully. Code: {response.status_code}")
    return response
