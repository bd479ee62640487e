"""
Wire shapes shared by every resource
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

T = TypeVar("T")


def _accepted_names(field_name: str) -> AliasChoices:
    """camelCase first, then the PascalCase and snake_case spellings"""
    return AliasChoices(to_camel(field_name), to_pascal(field_name), field_name)


class CamelModel(BaseModel):
    """Base model for downstream JSON (camelCase keys, first letter case-insensitive on input)"""
    model_config = ConfigDict(
        alias_generator=AliasGenerator(
            validation_alias=_accepted_names,
            serialization_alias=to_camel,
        ),
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)


class PartialUpdateModel(CamelModel):
    """Update body: only the fields the caller supplied are forwarded"""

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ErrorMessage(CamelModel):
    """Structured failure reported by the downstream service"""
    message: str
    code: Optional[Union[int, str]] = None
    status: Optional[Union[int, str]] = None


class PagedResponse(CamelModel, Generic[T]):
    """One page of results"""
    page: int
    page_size: int
    total_count: int
    data: List[T] = Field(default_factory=list)


class PaginationSearchQueryParams(BaseModel):
    """Pagination query parameters (Search, Page, PageSize)"""
    search: Optional[str] = None
    page: int = Field(default=1, ge=0)
    page_size: int = Field(default=10, ge=1)

    def to_query(self) -> Dict[str, Any]:
        """Query parameters in the downstream's naming"""
        return {
            "Search": self.search,
            "Page": self.page,
            "PageSize": self.page_size,
        }


class Acknowledgement(BaseModel):
    """Returned to the caller for Add, Update and Delete"""
    message: str
