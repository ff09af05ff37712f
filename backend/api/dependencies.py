"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.password import PasswordHasher
    from modules.auth.repository import UserRepository
    from modules.auth.tokens import TokenIssuer, TokenVerifier
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository
    from modules.profiles.github import GitHubClient
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._db: "Client | None" = None
        self._user_repository: "UserRepository | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._post_repository: "PostRepository | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._token_issuer: "TokenIssuer | None" = None
        self._token_verifier: "TokenVerifier | None" = None
        self._github_client: "GitHubClient | None" = None
        self._auth_service: "IAuthService | None" = None
        self._profile_service: "IProfileService | None" = None
        self._post_service: "IPostService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the Supabase service-role client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def profile_repository(self) -> "ProfileRepository":
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.db)
        return self._profile_repository

    @property
    def post_repository(self) -> "PostRepository":
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            self._post_repository = PostRepository(self.db)
        return self._post_repository

    @property
    def password_hasher(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.password import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    def _token_settings(self):
        from modules.auth.models import TokenSettings
        return TokenSettings(
            secret=self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
            expires_in=self.settings.jwt_expires_in,
        )

    @property
    def token_issuer(self) -> "TokenIssuer":
        if self._token_issuer is None:
            from modules.auth.tokens import TokenIssuer
            self._token_issuer = TokenIssuer(self._token_settings())
        return self._token_issuer

    @property
    def token_verifier(self) -> "TokenVerifier":
        if self._token_verifier is None:
            from modules.auth.tokens import TokenVerifier
            self._token_verifier = TokenVerifier(self._token_settings())
        return self._token_verifier

    @property
    def github(self) -> "GitHubClient":
        if self._github_client is None:
            from modules.profiles.github import GitHubClient
            self._github_client = GitHubClient(
                base_url=self.settings.github_api_url,
                token=self.settings.github_token or None,
                repo_limit=self.settings.github_repo_limit,
                timeout=self.settings.github_timeout,
            )
        return self._github_client

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                issuer=self.token_issuer,
                verifier=self.token_verifier,
            )
        return self._auth_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                repository=self.profile_repository,
                posts=self.posts,
                auth=self.auth,
                github=self.github,
            )
        return self._profile_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(
                repository=self.post_repository,
                auth=self.auth,
            )
        return self._post_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__(self._settings)


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts
