# puppy_bowl/config.py
from __future__ import annotations
import logging
import os

import yaml

from .models import AppConfig

# ===== App defaults (hard-coded API instance) =====
DEFAULT_CONFIG = {
    "api_base_url": "https://fsa-puppy-bowl.herokuapp.com/api",
    "cohort_name": "2302-acc-pt-web-pt-b",
    "request_timeout": 30.0,
    "log_level": "INFO",
    "page_title": "Puppy Bowl Roster",
}

CONFIG_PATH = "assets/config.yaml"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Session state keys
ROSTER_KEY = "roster"
OVERLAYS_KEY = "player_overlays"
OVERLAY_SEQ_KEY = "player_overlay_seq"
FORM_KEY = "new-player-form"
NAME_KEY = "new_player_name"
BREED_KEY = "new_player_breed"
STATUS_KEY = "new_player_status"


def load_app_config(path: str = CONFIG_PATH) -> AppConfig:
    """Defaults overlaid with the optional YAML file at `path`."""
    values = dict(DEFAULT_CONFIG)
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            obj = yaml.safe_load(f) or {}
        if not isinstance(obj, dict):
            raise ValueError(f"{path} must contain a mapping of settings.")
        values.update(obj)
    return AppConfig(**values)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<style>
:root{
  --surface: rgba(18, 22, 31, 0.78);
  --line:#2a3142;
  --text:#eaf1fb;
  --sub:#B7C2D3;
  --radius:16px;
  --shadow:0 12px 40px rgba(0,0,0,.35);
}
.player, .player-details{
  background: var(--surface) !important;
  border:1px solid rgba(255,255,255,.05);
  border-radius:var(--radius);
  box-shadow:var(--shadow);
  padding:14px 18px;
  margin-bottom:8px;
}
.player h2, .player-details h2 { margin:0 0 6px; color: var(--text); }
.player p, .player-details p { margin:2px 0; color: var(--sub); }
.player img, .player-details img {
  max-width:100%; max-height:220px; border-radius:12px; margin-top:8px;
}
.player-details { border-color: var(--line); }
.stButton > button {
  border:1px solid var(--line); border-radius:12px; padding:6px 12px;
}
</style>
"""
