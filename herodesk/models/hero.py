"""
Hero domain models and schemas.

Request/response schemas for hero operations.

Dependencies: pydantic
System role: Hero record contracts shared by stores, service and API
"""

from pydantic import BaseModel, Field


class CreateHeroRequest(BaseModel):
    """Request schema for creating a new hero. The store assigns the id."""

    name: str = Field(..., min_length=1, description="Hero name")


class Hero(BaseModel):
    """Hero record as held by the store."""

    id: int = Field(..., description="Store-assigned id, unique within the collection")
    name: str = Field(..., min_length=1, description="Hero name")
