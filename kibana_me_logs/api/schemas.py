"""
Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, Field


class DashboardLinkResponse(BaseModel):
    """Schema for a resolved Kibana dashboard link."""

    kibana_app: str = Field(..., description="Kibana application name")
    app: str = Field(..., description="Application whose logs are shown")
    app_guid: str = Field(..., description="GUID of the application")
    service_name: str = Field(..., description="Shared logstash service instance")
    base_url: str = Field(..., description="Base URL of the Kibana application")
    url: str = Field(..., description="Dashboard URL")

    @classmethod
    def from_entity(cls, link):
        """Create a response from a DashboardLink entity."""
        return cls(
            kibana_app=link.kibana_app,
            app=link.app,
            app_guid=link.app_guid,
            service_name=link.service_name,
            base_url=link.base_url,
            url=link.url,
        )


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Package version")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
