"""Session form contract for the HTML pages."""

from pydantic import BaseModel, ConfigDict, Field


class NewSessionForm(BaseModel):
    """Fields posted by the "new session" form on the index page."""

    session_name: str = Field(alias="SessionName", min_length=1)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)
