"""
Response Schemas
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ToolResponse(BaseModel):
    """Plain text result of a tool call plus structured data"""
    text: str
    is_error: bool = False
    data: Optional[Dict[str, Any]] = None


class ToolInfo(BaseModel):
    """Tool description for discovery"""
    name: str
    description: str
    input_schema: Dict[str, Any]


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    environment: str
    provider: Dict[str, Any] = Field(default_factory=dict)
    text_generation: Dict[str, Any] = Field(default_factory=dict)
    tld_count: int = 0
    uptime_seconds: float
