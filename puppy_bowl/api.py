# puppy_bowl/api.py
"""
Thin wrappers over the Puppy Bowl REST API.

Every call is a single round trip. Failures (network errors, bodies that
are not JSON, envelopes missing the expected keys) are logged and
swallowed: callers get ``None`` back instead of an exception.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

import requests

from .config import DEFAULT_CONFIG
from .models import AppConfig, PlayerDraft

logger = logging.getLogger(__name__)

API_URL = AppConfig(**DEFAULT_CONFIG).api_url
TIMEOUT = DEFAULT_CONFIG["request_timeout"]

PlayerId = Union[int, str]


def player_url(api_url: str, player_id: Optional[PlayerId] = None) -> str:
    base = f"{api_url.rstrip('/')}/players"
    if player_id is None:
        return base
    return f"{base}/{player_id}"


def _json_body(resp: requests.Response) -> Any:
    # Status is not treated as failure; the body is returned either way
    if not resp.ok:
        logger.warning("Puppy Bowl API answered %s on %s", resp.status_code, resp.url)
    return resp.json()


def fetch_all_players(api_url: str = API_URL, timeout: float = TIMEOUT) -> Optional[Dict[str, Any]]:
    """Return the roster envelope ``{"data": {"players": [...]}}``."""
    try:
        resp = requests.get(player_url(api_url), timeout=timeout)
        return _json_body(resp)
    except (requests.RequestException, ValueError) as e:
        logger.error("Uh oh, trouble fetching players! %s", e, exc_info=True)
        return None


def fetch_player_by_id(player_id: PlayerId, api_url: str = API_URL, timeout: float = TIMEOUT) -> Optional[Dict[str, Any]]:
    """Return the nested player record of ``{"data": {"player": {...}}}``."""
    try:
        resp = requests.get(player_url(api_url, player_id), timeout=timeout)
        body = _json_body(resp)
        return body["data"]["player"]
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        logger.error("Oh no, trouble fetching player #%s! %s", player_id, e, exc_info=True)
        return None


def create_player(draft: PlayerDraft, api_url: str = API_URL, timeout: float = TIMEOUT) -> Optional[Dict[str, Any]]:
    try:
        resp = requests.post(
            player_url(api_url),
            json=draft.model_dump(),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
        return _json_body(resp)
    except (requests.RequestException, ValueError) as e:
        logger.error("Trouble adding player %r to the roster! %s", draft.name, e, exc_info=True)
        return None


def delete_player(player_id: PlayerId, api_url: str = API_URL, timeout: float = TIMEOUT) -> None:
    try:
        resp = requests.delete(player_url(api_url, player_id), timeout=timeout)
        if not resp.ok:
            logger.warning("Delete of player #%s answered %s", player_id, resp.status_code)
    except requests.RequestException as e:
        logger.error("Whoops, trouble removing player #%s from the roster! %s", player_id, e, exc_info=True)
