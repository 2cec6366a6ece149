"""
Session Manager

Sole owner (single writer) of the credential and the current principal.

State machine:
    ANONYMOUS → AUTHENTICATING → AUTHENTICATED → ANONYMOUS
    (logout or a failed validation always lands in ANONYMOUS)

Races:
- Every state-mutating call takes a generation number
- A result that settles after the generation moved on is discarded
- logout() cancels work bound to the session through bind_to_session()
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

import anyio
from anyio import CancelScope

from ticketing_client.platform.constant.route_constant import (
    AUTH_LOGIN,
    AUTH_VALIDATE,
    USER_PROFILE,
)
from ticketing_client.platform.exception.exceptions import AuthenticationError, CustomBaseError
from ticketing_client.platform.http.payload_parser import parse_payload
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.session.app.interface.i_credential_store import ICredentialStore
from ticketing_client.service.session.domain.principal import Principal
from ticketing_client.service.session.domain.session_state import SessionState
from ticketing_client.service.session.schema.auth_schema import LoginResponse, UserEnvelope
from ticketing_client.service.shared_kernel.app.interface.i_busy_indicator import IBusyIndicator
from ticketing_client.service.shared_kernel.app.interface.i_notification_sink import (
    INotificationSink,
)
from ticketing_client.service.shared_kernel.domain.notification import NotificationKind


class SessionManager:
    def __init__(
        self,
        *,
        request_executor: ResilientRequestExecutor,
        credential_store: ICredentialStore,
        notification_sink: INotificationSink,
        busy_indicator: IBusyIndicator,
    ) -> None:
        self.request_executor = request_executor
        self.credential_store = credential_store
        self.notification_sink = notification_sink
        self.busy_indicator = busy_indicator

        self._state = SessionState.ANONYMOUS
        self._credential: Optional[str] = None
        self._principal: Optional[Principal] = None
        self._generation = 0
        self._bound_scopes: set[CancelScope] = set()
        # Serializes durable-store writes against generation checks
        self._store_lock = anyio.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def credential(self) -> Optional[str]:
        return self._credential

    @property
    def principal(self) -> Optional[Principal]:
        return self._principal

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    @property
    def is_admin(self) -> bool:
        return self._principal is not None and self._principal.is_admin

    @property
    def generation(self) -> int:
        return self._generation

    def require_credential(self, action: str = 'continue') -> str:
        """Credential for an authenticated call, for readers outside the session"""
        if self._state is not SessionState.AUTHENTICATED or self._credential is None:
            raise AuthenticationError(f'Please log in to {action}')
        return self._credential

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _reset(self) -> None:
        self._credential = None
        self._principal = None
        self._state = SessionState.ANONYMOUS

    async def _clear_store(self) -> None:
        """In-memory session is already gone; a stale durable copy is only logged"""
        try:
            await self.credential_store.clear()
        except CustomBaseError as e:
            Logger.base.error(f'🗝️ [SESSION] Stored credential left behind: {e.message}')

    @Logger.io
    async def restore(self) -> Optional[Principal]:
        """
        Re-validate the persisted credential at process start.

        Never raises for remote or storage failures: an unusable credential
        simply leaves the session ANONYMOUS.

        Returns:
            The validated principal, or None (nothing stored, rejected, or superseded)
        """
        generation = self._next_generation()
        try:
            stored_credential = await self.credential_store.load()
        except CustomBaseError as e:
            Logger.base.warning(f'🗝️ [RESTORE] Credential store unavailable: {e.message}')
            return None

        if not self._is_current(generation):
            Logger.base.info('⏭️ [RESTORE] Session changed while reading the store, skipping')
            return None
        if not stored_credential:
            Logger.base.info('🔓 [RESTORE] No stored credential, staying anonymous')
            return None

        self._credential = stored_credential
        self._principal = None
        self._state = SessionState.AUTHENTICATING

        try:
            with self.busy_indicator.track():
                payload = await self.request_executor.execute(
                    AUTH_VALIDATE, RequestSpec.get(credential=stored_credential)
                )
            principal = parse_payload(UserEnvelope, payload).user.to_entity()
        except CustomBaseError as e:
            if not self._is_current(generation):
                Logger.base.info('⏭️ [RESTORE] Discarding stale validation failure')
                return None
            Logger.base.warning(f'🔒 [RESTORE] Stored credential rejected: {e.message}')
            await self.logout()
            return None

        if not self._is_current(generation):
            Logger.base.info('⏭️ [RESTORE] Discarding stale validation result')
            return None

        self._principal = principal
        self._state = SessionState.AUTHENTICATED
        Logger.base.info(f'✅ [RESTORE] Session restored for {principal.email}')
        return principal

    @Logger.io
    async def login(self, *, email: str, password: str) -> Optional[Principal]:
        """
        Exchange email/password for a credential.

        Input format rules are the server's business; nothing is checked here.

        Returns:
            The new principal, or None when a later login/logout superseded this call

        Raises:
            TransportError, RemoteError: login failed (already notified)
            CredentialStoreError: accepted remotely but not persisted (already notified)
        """
        generation = self._next_generation()
        self._principal = None
        self._state = SessionState.AUTHENTICATING

        try:
            with self.busy_indicator.track():
                payload = await self.request_executor.execute(
                    AUTH_LOGIN, RequestSpec.post(body={'email': email, 'password': password})
                )
            login_response = parse_payload(LoginResponse, payload)
        except CustomBaseError as e:
            if self._is_current(generation):
                self._reset()
                async with self._store_lock:
                    await self._clear_store()
                self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            raise

        principal = login_response.user.to_entity()
        async with self._store_lock:
            if not self._is_current(generation):
                Logger.base.info('⏭️ [LOGIN] Discarding login superseded by a later call')
                return None
            try:
                await self.credential_store.save(login_response.token)
            except CustomBaseError as e:
                # Accepted remotely but not persisted: the session is not installed
                if self._is_current(generation):
                    self._reset()
                    self.notification_sink.notify(e.message, NotificationKind.FAILURE)
                raise
            if not self._is_current(generation):
                Logger.base.info('⏭️ [LOGIN] Superseded while persisting, discarding')
                return None
            self._credential = login_response.token
            self._principal = principal
            self._state = SessionState.AUTHENTICATED

        Logger.base.info(f'✅ [LOGIN] Logged in as {principal.email} ({principal.role})')
        self.notification_sink.notify('Login successful', NotificationKind.SUCCESS)
        return principal

    @Logger.io
    async def logout(self) -> None:
        """Drop the session unconditionally; safe to call when already anonymous"""
        self._next_generation()
        self._reset()

        for scope in tuple(self._bound_scopes):
            scope.cancel()

        async with self._store_lock:
            await self._clear_store()

        Logger.base.info('👋 [LOGOUT] Session cleared')
        self.notification_sink.notify('Logged out successfully', NotificationKind.SUCCESS)

    @Logger.io
    async def update_profile(self, *, name: str, email: str) -> Optional[Principal]:
        """
        Update the current user's name/email and install the returned principal.

        Returns:
            The updated principal, or None when the session changed meanwhile

        Raises:
            AuthenticationError: no authenticated session
            TransportError, RemoteError: update failed (already notified)
        """
        credential = self.require_credential('update your profile')

        generation = self._generation
        try:
            with self.busy_indicator.track():
                payload = await self.request_executor.execute(
                    USER_PROFILE,
                    RequestSpec.put(
                        body={'name': name, 'email': email}, credential=credential
                    ),
                )
            principal = parse_payload(UserEnvelope, payload).user.to_entity()
        except CustomBaseError as e:
            if self._is_current(generation):
                self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            raise

        if not self._is_current(generation):
            Logger.base.info('⏭️ [PROFILE] Session changed during update, discarding')
            return None

        self._principal = principal
        self.notification_sink.notify('Profile updated successfully', NotificationKind.SUCCESS)
        return principal

    @contextmanager
    def bind_to_session(self) -> Iterator[CancelScope]:
        """
        Run a block that logout() may abort.

        Usage:
            with session_manager.bind_to_session() as scope:
                await ...
            if scope.cancelled_caught:
                ...  # aborted by logout
        """
        scope = CancelScope()
        self._bound_scopes.add(scope)
        try:
            with scope:
                yield scope
        finally:
            self._bound_scopes.discard(scope)
