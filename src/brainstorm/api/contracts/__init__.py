from .health import HealthResponse
from .ideas import IdeaResponse, NewIdeaRequest, SessionResponse
from .sessions import NewSessionForm

__all__ = [
    "HealthResponse",
    "IdeaResponse",
    "NewIdeaRequest",
    "NewSessionForm",
    "SessionResponse",
]
