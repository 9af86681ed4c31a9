"""Request/response shapes exposed by the routers."""

from .person import PersonRequest, PersonResponse

__all__ = ["PersonRequest", "PersonResponse"]
