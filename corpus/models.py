# /corpus/models.py

from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None


class CorpusMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    device_id: Optional[str] = Field(default=None, alias="deviceId")
    timestamp: datetime
    location: Optional[Location] = None
    tags: List[str] = Field(default_factory=list)


class Corpus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    type: Literal["log", "fault", "kpi", "inspection", "manual"]
    content: str
    source: str
    metadata: CorpusMetadata
    processed: bool = False
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class FaultCase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: str
    type: str = Field(description="The fault category.")
    description: str
    symptoms: List[str] = Field(default_factory=list)
    solution: str = ""
    severity: int = Field(ge=1, le=5, description="Severity from 1 (minor) to 5 (critical).")
    device_ids: List[str] = Field(default_factory=list, alias="deviceIds")
    log_ids: List[str] = Field(default_factory=list, alias="logIds")
    status: Literal["open", "closed", "in_progress"] = "open"
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    created_by: Optional[str] = Field(default=None, alias="createdBy")


class Device(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: str
    vendor: str
    model: str
    protocol: str
    location: Location
    status: Literal["online", "offline", "maintenance", "warning", "error"]
    last_updated: datetime = Field(alias="lastUpdated")


class ParsedLog(BaseModel):
    vendor: str
    template: Optional[str] = None
    params: dict = Field(default_factory=dict)
    original: str
