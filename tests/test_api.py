from unittest.mock import MagicMock, patch

import requests

from puppy_bowl.api import (
    create_player,
    delete_player,
    fetch_all_players,
    fetch_player_by_id,
    player_url,
)
from puppy_bowl.models import PlayerDraft

API = "https://example.test/api/cohort"


def _response(body, status=200):
    resp = MagicMock()
    resp.ok = status < 400
    resp.status_code = status
    resp.url = API
    resp.json.return_value = body
    return resp


def test_player_url():
    assert player_url(API) == f"{API}/players"
    assert player_url(API + "/", 7) == f"{API}/players/7"


def test_fetch_all_players_returns_body():
    body = {"success": True, "data": {"players": [{"id": 1, "name": "Rex"}]}}
    with patch("puppy_bowl.api.requests.get", return_value=_response(body)) as get:
        assert fetch_all_players(API) == body
    assert get.call_args.args[0] == f"{API}/players"


def test_fetch_all_players_network_error_is_swallowed():
    with patch("puppy_bowl.api.requests.get", side_effect=requests.ConnectionError("down")):
        assert fetch_all_players(API) is None


def test_fetch_all_players_bad_json_is_swallowed():
    resp = _response(None)
    resp.json.side_effect = ValueError("not json")
    with patch("puppy_bowl.api.requests.get", return_value=resp):
        assert fetch_all_players(API) is None


def test_fetch_player_by_id_unwraps_envelope():
    body = {"data": {"player": {"id": 3, "name": "Bella"}}}
    with patch("puppy_bowl.api.requests.get", return_value=_response(body)) as get:
        assert fetch_player_by_id(3, API) == {"id": 3, "name": "Bella"}
    assert get.call_args.args[0] == f"{API}/players/3"


def test_fetch_player_by_id_missing_resource():
    body = {"success": False, "error": {"name": "PlayerNotFound"}, "data": None}
    with patch("puppy_bowl.api.requests.get", return_value=_response(body, 404)):
        assert fetch_player_by_id(99, API) is None


def test_create_player_posts_exact_body():
    created = {"data": {"newPlayer": {"id": 5, "name": "Rex"}}}
    with patch("puppy_bowl.api.requests.post", return_value=_response(created)) as post:
        out = create_player(PlayerDraft(name="Rex", breed="Beagle", status="bench"), API)
    assert out == created
    assert post.call_args.args[0] == f"{API}/players"
    assert post.call_args.kwargs["json"] == {"name": "Rex", "breed": "Beagle", "status": "bench"}


def test_create_player_sends_values_untrimmed():
    with patch("puppy_bowl.api.requests.post", return_value=_response({})) as post:
        create_player(PlayerDraft(name=" Rex ", breed="", status=""), API)
    assert post.call_args.kwargs["json"] == {"name": " Rex ", "breed": "", "status": ""}


def test_delete_player_ignores_status():
    with patch("puppy_bowl.api.requests.delete", return_value=_response({}, 500)) as delete:
        assert delete_player(4, API) is None
    assert delete.call_args.args[0] == f"{API}/players/4"


def test_delete_player_network_error_is_swallowed():
    with patch("puppy_bowl.api.requests.delete", side_effect=requests.Timeout("slow")):
        delete_player(4, API)


def test_failures_are_logged_with_lazy_arguments(caplog):
    with patch("puppy_bowl.api.requests.get", side_effect=requests.ConnectionError("down")):
        fetch_player_by_id(12, API)
    record = caplog.records[-1]
    assert record.levelname == "ERROR"
    assert record.msg == "Oh no, trouble fetching player #%s! %s"
    assert record.args[0] == 12
    assert "player #12" in record.getMessage()
