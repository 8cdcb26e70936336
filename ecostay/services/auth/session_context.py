"""
Authenticated session context.

Holds the signed-in user and their profile for the lifetime of an
application session. The context is created by the application and
passed explicitly to the views that need it; it is never a module-level
singleton.

Example:
    async with SessionContext(store, profiles) as session:
        await session.sign_in(email, password)
        view = DashboardView(services, session)
"""

from typing import Optional

from ecostay.core.constants import ERROR_PASSWORD_MISMATCH
from ecostay.core.exceptions import AuthenticationError, MissingFieldError, ValidationError
from ecostay.core.logging import get_logger
from ecostay.db.remote_store import AuthSession, AuthUser, RemoteStore, StoreError
from ecostay.repositories.user import ProfileRepository
from ecostay.schemas.profile import Profile, ProfileCreate, ProfileUpdate, SignUpForm

logger = get_logger(__name__)


class SessionContext:
    def __init__(self, store: RemoteStore, profiles: ProfileRepository):
        self.store = store
        self.profiles = profiles
        self.user: Optional[AuthUser] = None
        self.profile: Optional[Profile] = None
        self._auth: Optional[AuthSession] = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self, restored: Optional[AuthSession] = None) -> "SessionContext":
        """Start the session, optionally resuming a persisted auth session."""
        if restored is not None:
            await self._activate(restored)
        self._initialized = True
        logger.debug("Session initialized", extra={"user_id": self.user_id})
        return self

    async def teardown(self) -> None:
        """End the session, signing out a signed-in user."""
        if self.user is not None:
            await self.sign_out()
        self._initialized = False
        logger.debug("Session torn down")

    async def __aenter__(self) -> "SessionContext":
        return await self.initialize()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.teardown()

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user else None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_manager(self) -> bool:
        return self.profile is not None and self.profile.is_manager

    def require_user(self, message: str = "Please sign in first") -> AuthUser:
        if self.user is None:
            raise AuthenticationError(message)
        return self.user

    async def _activate(self, auth: AuthSession) -> None:
        self._auth = auth
        self.user = auth.user
        self.store.set_access_token(auth.access_token)
        await self.refresh_profile()

    async def refresh_profile(self) -> Optional[Profile]:
        if self.user is None:
            self.profile = None
            return None
        self.profile = await self.profiles.get(self.user.id)
        return self.profile

    # ------------------------------------------------------------------
    # Auth flows
    # ------------------------------------------------------------------

    async def sign_up(self, form: SignUpForm) -> AuthUser:
        """
        Register an account and its profile.

        Raises:
            ValidationError: passwords differ or a field is empty
            AuthenticationError: the auth endpoint refused the sign-up
            RemoteWriteError: the profile row could not be stored
        """
        if form.password != form.confirm_password:
            raise ValidationError(
                ERROR_PASSWORD_MISMATCH,
                field_errors={"confirm_password": [ERROR_PASSWORD_MISMATCH]},
            )
        missing = [name for name in ("first_name", "last_name", "email", "password") if not getattr(form, name)]
        if missing:
            raise MissingFieldError("Please fill all required fields", missing)

        try:
            user = await self.store.sign_up(
                form.email,
                form.password,
                {"full_name": form.full_name, "role": form.role.value},
            )
        except StoreError as e:
            raise AuthenticationError(str(e.message), details={"status": e.status_code}) from e

        await self.profiles.create(
            ProfileCreate(id=user.id, email=form.email, full_name=form.full_name, role=form.role)
        )
        logger.info("Account created", extra={"user_id": user.id, "role": form.role.value})
        return user

    async def sign_in(self, email: str, password: str) -> Optional[Profile]:
        if not email or not password:
            raise MissingFieldError("Please enter your email and password", ["email", "password"])
        try:
            auth = await self.store.sign_in(email, password)
        except StoreError as e:
            raise AuthenticationError(str(e.message), details={"status": e.status_code}) from e
        await self._activate(auth)
        logger.info("Signed in", extra={"user_id": self.user_id})
        return self.profile

    async def sign_out(self) -> None:
        user_id = self.user_id
        try:
            await self.store.sign_out()
        except StoreError as e:
            raise AuthenticationError(str(e.message), details={"status": e.status_code}) from e
        finally:
            self.user = None
            self.profile = None
            self._auth = None
            self.store.set_access_token(None)
        logger.info("Signed out", extra={"user_id": user_id})

    async def update_profile(self, update: ProfileUpdate) -> Optional[Profile]:
        user = self.require_user()
        patch = update.to_patch()
        if not patch:
            return self.profile
        profile = await self.profiles.update(user.id, patch)
        if profile is not None:
            self.profile = profile
        return self.profile
