# puppy_bowl/views.py
"""
Render functions and event handlers for the roster page.

Containers (Streamlit placeholders from ``st.empty()``) and the session
state mapping are passed in explicitly. Handlers are wired as widget
callbacks: they only touch the state, and the rerun that follows every
interaction redraws the page from it. Each function logs and swallows
its own failures, so a broken response leaves the UI as it was.
"""
from __future__ import annotations
import logging
from typing import Any, MutableMapping, Optional

from pydantic import ValidationError

from .api import API_URL, TIMEOUT, PlayerId, create_player, delete_player, fetch_all_players, fetch_player_by_id
from .config import (
    BREED_KEY,
    FORM_KEY,
    NAME_KEY,
    OVERLAY_SEQ_KEY,
    OVERLAYS_KEY,
    ROSTER_KEY,
    STATUS_KEY,
)
from .markup import player_card_html, player_details_html
from .models import Player, PlayerDraft

logger = logging.getLogger(__name__)

State = MutableMapping[str, Any]


# ---------- Roster list ----------
def render_roster(
    roster: Optional[dict],
    container,
    state: State,
    api_url: str = API_URL,
    timeout: float = TIMEOUT,
) -> None:
    """Replace the list container with one card per player in the envelope.

    A record that does not parse as a player is logged and skipped; the
    rest of the roster still renders.
    """
    try:
        container.empty()
        records = roster["data"]["players"]
        box = container.container()
    except (KeyError, TypeError) as e:
        logger.error("Uh oh, trouble rendering players! %s", e, exc_info=True)
        return

    for record in records:
        try:
            player = Player.model_validate(record)
        except ValidationError as e:
            logger.error("Skipping malformed player record %r: %s", record, e)
            continue
        box.markdown(player_card_html(player), unsafe_allow_html=True)
        box.button(
            "Details",
            key=f"details-{player.id}",
            on_click=render_player_details,
            args=(state, player.id, api_url, timeout),
        )
        box.button(
            "Delete",
            key=f"delete-{player.id}",
            on_click=remove_player,
            args=(state, player.id, api_url, timeout),
        )


def remove_player(state: State, player_id: PlayerId, api_url: str = API_URL, timeout: float = TIMEOUT) -> None:
    # Re-fetch whether or not the delete went through
    try:
        delete_player(player_id, api_url, timeout)
        state[ROSTER_KEY] = fetch_all_players(api_url, timeout)
    except Exception as e:
        logger.error("Whoops, trouble removing player #%s from the roster! %s", player_id, e, exc_info=True)


def reload_roster(state: State, api_url: str = API_URL, timeout: float = TIMEOUT) -> None:
    state[ROSTER_KEY] = fetch_all_players(api_url, timeout)


# ---------- Detail overlays ----------
def render_player_details(state: State, player_id: PlayerId, api_url: str = API_URL, timeout: float = TIMEOUT) -> None:
    """Fetch one player and put its overlay on top of the stack."""
    try:
        player = Player.model_validate(fetch_player_by_id(player_id, api_url, timeout))
        token = state.get(OVERLAY_SEQ_KEY, 0) + 1
        state[OVERLAY_SEQ_KEY] = token
        overlay = {"token": token, "player": player.model_dump(by_alias=True)}
        state[OVERLAYS_KEY] = [overlay] + list(state.get(OVERLAYS_KEY, []))
    except ValidationError as e:
        logger.error("Oh, can't show details for player #%s! %s", player_id, e, exc_info=True)


def close_overlay(state: State, token: int) -> None:
    state[OVERLAYS_KEY] = [o for o in state.get(OVERLAYS_KEY, []) if o["token"] != token]


def render_overlays(container, state: State) -> None:
    try:
        container.empty()
        box = container.container()
        for overlay in state.get(OVERLAYS_KEY, []):
            player = Player.model_validate(overlay["player"])
            box.markdown(player_details_html(player), unsafe_allow_html=True)
            box.button(
                "Close",
                key=f"close-{overlay['token']}",
                on_click=close_overlay,
                args=(state, overlay["token"]),
            )
    except (KeyError, TypeError, ValidationError) as e:
        logger.error("Uh oh, trouble rendering player details! %s", e, exc_info=True)


# ---------- New player form ----------
def submit_new_player(state: State, api_url: str = API_URL, timeout: float = TIMEOUT) -> None:
    try:
        draft = PlayerDraft(
            name=state.get(NAME_KEY) or "",
            breed=state.get(BREED_KEY) or "",
            status=state.get(STATUS_KEY) or "",
        )
        create_player(draft, api_url, timeout)
        state[ROSTER_KEY] = fetch_all_players(api_url, timeout)
    except Exception as e:
        logger.error("Uh oh, trouble submitting the new player! %s", e, exc_info=True)


def render_creation_form(container, state: State, api_url: str = API_URL, timeout: float = TIMEOUT) -> None:
    try:
        container.empty()
        form = container.container().form(FORM_KEY)
        form.subheader("Add New Player")
        form.text_input("Name", key=NAME_KEY)
        form.text_input("Breed", key=BREED_KEY)
        form.text_input("Status", key=STATUS_KEY)
        form.form_submit_button(
            "Submit",
            key="submit-new-player",
            on_click=submit_new_player,
            args=(state, api_url, timeout),
        )
    except Exception as e:
        logger.error("Uh oh, trouble rendering the new player form! %s", e, exc_info=True)


# ---------- Startup ----------
def init(
    state: State,
    list_container,
    form_container,
    overlay_container=None,
    api_url: str = API_URL,
    timeout: float = TIMEOUT,
) -> None:
    """Fetch the roster on a session's first run, then draw the page."""
    try:
        if ROSTER_KEY not in state:
            state[ROSTER_KEY] = fetch_all_players(api_url, timeout)
            logger.debug("Fetched roster: %s", state[ROSTER_KEY])
        if overlay_container is not None:
            render_overlays(overlay_container, state)
        render_roster(state[ROSTER_KEY], list_container, state, api_url, timeout)
        render_creation_form(form_container, state, api_url, timeout)
    except Exception as e:
        logger.error("Uh oh, trouble starting the roster page! %s", e, exc_info=True)
