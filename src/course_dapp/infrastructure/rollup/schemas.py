"""Pydantic schemas for the rollup HTTP server API."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Status(StrEnum):
    """Final status of a processed request, sent with the next finish call."""

    ACCEPT = "accept"
    REJECT = "reject"


class RequestType(StrEnum):
    """Kinds of request the rollup host hands out."""

    ADVANCE_STATE = "advance_state"
    INSPECT_STATE = "inspect_state"

    @property
    def label(self) -> str:
        """Short name used in messages ("advance" or "inspect")."""
        return self.value.removesuffix("_state")


class FinishRequest(BaseModel):
    """Body of the long-poll call carrying the previous request's status."""

    status: Status


class RollupRequest(BaseModel):
    """A pending request returned by the finish call."""

    request_type: str
    data: dict[str, Any] = Field(default_factory=dict)


class AdvanceMetadata(BaseModel):
    """
    Block context of an advance request.

    Passed through as received: values are not type checked and unknown
    keys are kept, so odd metadata never blocks the action itself.
    """

    model_config = ConfigDict(extra="allow")

    msg_sender: Any = None
    epoch_index: Any = None
    input_index: Any = None
    block_number: Any = None
    timestamp: Any = None


class AdvanceData(BaseModel):
    """Data of an advance_state request."""

    metadata: AdvanceMetadata = Field(default_factory=AdvanceMetadata)
    payload: str = Field(..., description="Hex encoded UTF-8 JSON action call")

    @field_validator("metadata", mode="before")
    @classmethod
    def default_missing_metadata(cls, value: Any) -> Any:
        """Treat null or non-object metadata as empty."""
        return value if isinstance(value, dict) else {}


class InspectData(BaseModel):
    """Data of an inspect_state request."""

    payload: str = Field(..., description="Hex encoded UTF-8 path: action/arg1/arg2")


class ActionCall(BaseModel):
    """Decoded advance payload naming the action to run."""

    action: str
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def default_missing_data(cls, value: Any) -> Any:
        """Treat an explicit null as an empty argument object."""
        return {} if value is None else value


class PayloadBody(BaseModel):
    """Body of notice and report calls."""

    payload: str = Field(..., description="Hex encoded UTF-8 JSON")
