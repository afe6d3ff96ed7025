# puppy_bowl/models.py
from __future__ import annotations
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppConfig(BaseModel):
    api_base_url: str = "https://fsa-puppy-bowl.herokuapp.com/api"
    cohort_name: str = "2302-acc-pt-web-pt-b"
    request_timeout: float = 30.0
    log_level: str = "INFO"
    page_title: str = "Puppy Bowl Roster"

    @field_validator("api_base_url", "cohort_name")
    @classmethod
    def _nonempty(cls, v):
        if not str(v).strip():
            raise ValueError("api_base_url and cohort_name must be non-empty")
        return v

    @property
    def api_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.cohort_name.strip('/')}"


class Player(BaseModel):
    # Numbers sent in text fields are kept as text
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: Union[int, str]
    name: Optional[str] = None
    breed: Optional[str] = None
    status: Optional[str] = None
    team_id: Optional[Union[int, str]] = Field(default=None, alias="teamId")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class PlayerDraft(BaseModel):
    # Sent verbatim: no trimming, empty strings allowed
    name: str = ""
    breed: str = ""
    status: str = ""
