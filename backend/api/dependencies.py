"""
Dependency injection setup for FastAPI.

``ServiceContainer`` wires the repositories, the password hasher, the
token service and the module services together. One container is built
explicitly in ``create_app`` and stored on ``app.state``; route
dependencies read it from the request, so tests can build an app around
a container of fakes.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.auth.password import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.products.interfaces import IProductRepository, IProductService


class ServiceContainer:
    """
    Container for all service instances.

    Anything passed to the constructor is used as-is; everything else is
    created lazily on first access from ``settings``. Built members are
    only read afterwards.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        user_repository: "IUserRepository | None" = None,
        product_repository: "IProductRepository | None" = None,
        password_hasher: "PasswordHasher | None" = None,
        token_service: "TokenService | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._user_repository = user_repository
        self._product_repository = product_repository
        self._password_hasher = password_hasher
        self._token_service = token_service
        self._auth_service: "IAuthService | None" = None
        self._product_service: "IProductService | None" = None

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client(self.settings))
        return self._user_repository

    @property
    def product_repository(self) -> "IProductRepository":
        """Get the product repository instance."""
        if self._product_repository is None:
            from modules.products.repository import ProductRepository
            from shared.database import get_supabase_client
            self._product_repository = ProductRepository(get_supabase_client(self.settings))
        return self._product_repository

    @property
    def password_hasher(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.password import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def token_service(self) -> "TokenService":
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(self.settings.jwt_secret)
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.token_service,
            )
        return self._auth_service

    @property
    def products(self) -> "IProductService":
        """Get the product catalog service instance."""
        if self._product_service is None:
            from modules.products.service import ProductService
            self._product_service = ProductService(self.product_repository)
        return self._product_service


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_product_service(container: ServiceContainer = Depends(get_container)) -> "IProductService":
    """FastAPI dependency for product catalog service."""
    return container.products
