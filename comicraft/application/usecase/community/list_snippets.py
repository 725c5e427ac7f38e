"""List the current user's snippets."""

from pydantic import BaseModel

from comicraft.domain.service import MembershipService
from comicraft.domain.value import UserId

from .common import SnippetItem


class ListSnippetsRequest(BaseModel):
    """List snippets request."""

    user_id: str


class ListSnippetsResponse(BaseModel):
    """List snippets response."""

    snippets: list[SnippetItem]


class ListSnippetsUseCase:
    """Use case for fetching the communities a user belongs to."""

    def __init__(self, membership_service: MembershipService) -> None:
        self.membership_service = membership_service

    async def execute(self, request: ListSnippetsRequest) -> ListSnippetsResponse:
        snippets = await self.membership_service.list_snippets(UserId(request.user_id))
        return ListSnippetsResponse(
            snippets=[SnippetItem.from_domain(s) for s in snippets]
        )
