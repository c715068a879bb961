"""Check availability use case."""

from pydantic import BaseModel

from quill.domain.service import UserService


class CheckAvailabilityRequest(BaseModel):
    """An email address or a username."""

    identifier: str


class CheckAvailabilityResponse(BaseModel):
    """Whether the identifier is already used."""

    is_taken: bool


class CheckAvailabilityUseCase:
    """Use case for checking if an email or username is free."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(
        self, request: CheckAvailabilityRequest
    ) -> CheckAvailabilityResponse:
        taken = await self.user_service.is_taken(request.identifier)
        return CheckAvailabilityResponse(is_taken=taken)
