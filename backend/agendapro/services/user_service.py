from typing import Optional

from agendapro.core.exceptions import Unauthenticated, ValidationFailure
from agendapro.core.security import hash_password, verify_password
from agendapro.domain.entities import User as DomainUser
from agendapro.domain.interfaces import IUserRepository
from agendapro.schemas.dtos import SignUpRequest


class UserService:
    """Application service for owner accounts.

    Keeps credential rules out of the controllers and depends on the
    IUserRepository abstraction only.
    """

    def __init__(self, repo: IUserRepository) -> None:
        self.repo = repo

    def sign_up(self, request: SignUpRequest) -> DomainUser:
        """Create an owner account.

        Business Rules:
        - Email must be valid and not already registered
        - Password must have at least 6 characters
        """
        request.validate()
        if self.repo.get_by_email(request.email) is not None:
            raise ValidationFailure("Email already registered")

        return self.repo.create(
            DomainUser(
                email=request.email,
                password_hash=hash_password(request.password),
            )
        )

    def authenticate(self, email: str, password: str) -> DomainUser:
        """Return the account matching the credentials or raise Unauthenticated."""
        user: Optional[DomainUser] = None
        if email and password:
            user = self.repo.get_by_email(email.strip().lower())
        if user is None or not user.password_hash:
            raise Unauthenticated("Invalid email or password")
        if not verify_password(password, user.password_hash):
            raise Unauthenticated("Invalid email or password")
        return user
