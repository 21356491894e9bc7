"""
Data transfer objects for placeholder resources.

Attributes are snake_case; the wire format is the service's camelCase.
Both spellings are accepted on input. Every field is optional so partial
payloads can be sent, and unset fields are left out of request bodies.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PlaceholderDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CommentDto(PlaceholderDto):
    id: Optional[int] = None
    post_id: Optional[int] = Field(None, alias="postId")
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None


class GeoDto(PlaceholderDto):
    lat: Optional[str] = None
    lng: Optional[str] = None


class AddressDto(PlaceholderDto):
    street: Optional[str] = None
    suite: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    geo: Optional[GeoDto] = None


class CompanyDto(PlaceholderDto):
    name: Optional[str] = None
    catch_phrase: Optional[str] = Field(None, alias="catchPhrase")
    bs: Optional[str] = None


class UserDto(PlaceholderDto):
    id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    address: Optional[AddressDto] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[CompanyDto] = None
