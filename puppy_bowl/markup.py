# puppy_bowl/markup.py
"""
HTML snippets for player cards and detail overlays, rendered through
st.markdown(..., unsafe_allow_html=True). UI-agnostic so they can be
checked without a Streamlit runtime.
"""
from __future__ import annotations
from html import escape

from .models import Player


def _text(value) -> str:
    return escape("" if value is None else str(value))


def team_label(player: Player) -> str:
    if player.team_id is None:
        return "Team: unassigned"
    return f"Team: {player.team_id}"


def _body(player: Player) -> str:
    return (
        f"<h2>{_text(player.name)}</h2>"
        f'<p class="breed">{_text(player.breed)}</p>'
        f'<p class="status">{_text(player.status)}</p>'
        f'<p class="team">{_text(team_label(player))}</p>'
        f'<img src="{_text(player.image_url)}" alt="{_text(player.name)}">'
    )


def player_card_html(player: Player) -> str:
    return f'<div class="player" data-id="{_text(player.id)}">{_body(player)}</div>'


def player_details_html(player: Player) -> str:
    return f'<div class="player-details" data-id="{_text(player.id)}">{_body(player)}</div>'
