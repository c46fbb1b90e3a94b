# schemas/accommodation.py
"""
Pydantic schemas for Accommodation API request/response validation.

On the wire an accommodation is ``{id, name, type, desc, address,
availability, ownerId}``; the models use ``description`` and ``owner_id``.
"""
from typing import Any, Optional, List
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AccommodationCreate(BaseModel):
     """
     Schema for creating an accommodation.

     Every field is optional at parse time so that a missing field produces
     the API's own "Missing required fields" answer instead of a schema error.
     """
     name: Optional[str] = Field(None, description="Accommodation name", examples=["My House"])
     type: Optional[str] = Field(None, description="Accommodation type", examples=["House"])
     description: Optional[str] = Field(None, alias="desc", description="Free text description")
     address: Optional[str] = Field(None, description="Postal address")
     availability: Optional[bool] = Field(None, description="Whether the accommodation can be rented")
     owner_id: Optional[int] = Field(None, alias="ownerId", description="ID of the owning user (role OWNER)")

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "name": "Test House",
                    "type": "House",
                    "desc": "A test house",
                    "address": "123 Main St",
                    "availability": True,
                    "ownerId": 1
               }
          }
     )

     def missing_fields(self) -> List[str]:
          """Names of required fields that are absent or empty. ``availability`` only counts when absent."""
          missing = [
               field for field in ("name", "type", "description", "address", "owner_id")
               if not getattr(self, field)
          ]
          if self.availability is None:
               missing.append("availability")
          return missing


class AccommodationUpdate(BaseModel):
     """
     Schema for a partial update.

     A field is either absent (left untouched), present with a value (patched),
     or explicitly null. ``model_fields_set`` tells absent and null apart.
     """
     name: Optional[str] = None
     type: Optional[str] = None
     address: Optional[str] = None
     description: Optional[str] = Field(None, alias="desc")
     availability: Optional[bool] = None

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "name": "New Name",
                    "availability": False
               }
          }
     )

     def null_fields(self) -> List[str]:
          """Fields that were sent with an explicit null."""
          return [name for name in self.model_fields_set if getattr(self, name) is None]

     def changes(self) -> dict:
          """Column -> value for every field that was supplied."""
          return self.model_dump(exclude_unset=True)


class AccommodationResponse(BaseModel):
     """Schema for accommodation response."""
     id: int
     name: str
     type: str
     description: str = Field(
          validation_alias=AliasChoices("description", "desc"),
          serialization_alias="desc",
     )
     address: str
     availability: bool
     owner_id: int = Field(
          validation_alias=AliasChoices("owner_id", "ownerId"),
          serialization_alias="ownerId",
     )

     model_config = ConfigDict(
          from_attributes=True,
          json_schema_extra={
               "example": {
                    "id": 1,
                    "name": "Test House",
                    "type": "House",
                    "desc": "A test house",
                    "address": "123 Main St",
                    "availability": True,
                    "ownerId": 1
               }
          }
     )


class AccommodationUpdateResponse(BaseModel):
     """Response for PUT /update/{id}."""
     message: str
     updated_accommodation: AccommodationResponse = Field(
          validation_alias=AliasChoices("updated_accommodation", "updatedAccommodation"),
          serialization_alias="updatedAccommodation",
     )


class MessageResponse(BaseModel):
     message: str


class ErrorResponse(BaseModel):
     """Body returned for every failed request."""
     error: str
     details: Optional[Any] = None
