"""
Shared test doubles

- FakeRemote: scripted remote API behind httpx.MockTransport
- RecordingNotificationSink: keeps every notification for assertions
"""

from collections import defaultdict
from inspect import isawaitable
from typing import Any, Callable

import httpx
import orjson

from ticketing_client.service.shared_kernel.domain.notification import (
    Notification,
    NotificationKind,
)


BASE_URL = 'http://remote.test'
GENERIC_ERROR_MESSAGE = 'Something went wrong'

Responder = httpx.Response | Exception | Callable[[httpx.Request], Any]


def json_response(status_code: int, body: Any = None) -> httpx.Response:
    if body is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, json=body)


def event_payload(
    *,
    event_id: str = 'evt-1',
    available_tickets: int = 10,
    total_capacity: int = 100,
    price: float = 25.0,
    name: str = 'Spring Concert',
) -> dict[str, Any]:
    return {
        'id': event_id,
        'name': name,
        'description': 'Live music',
        'date': '2026-05-01T19:00:00Z',
        'location': 'Main Hall',
        'totalCapacity': total_capacity,
        'availableTickets': available_tickets,
        'price': price,
    }


def user_payload(*, role: str = 'user', name: str = 'Alice') -> dict[str, Any]:
    return {'id': 7, 'email': 'alice@example.com', 'name': name, 'role': role}


class FakeRemote:
    """
    Routes (method, path) to a queue of scripted responses.

    The last responder of a route repeats once the queue runs dry. A responder is
    an httpx.Response, an exception to raise (transport failure), or a callable
    (sync or async) taking the request.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], list[Responder]] = {}
        self.requests: list[httpx.Request] = []
        self._hits: dict[tuple[str, str], int] = defaultdict(int)

    def on(self, method: str, path: str, *responders: Responder) -> 'FakeRemote':
        self._routes[(method, path)] = list(responders)
        self._hits[(method, path)] = 0
        return self

    def count(self, method: str, path: str) -> int:
        return sum(
            1 for request in self.requests if (request.method, request.url.path) == (method, path)
        )

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if (request.method, request.url.path) == (method, path)
        ]

    @staticmethod
    def body_of(request: httpx.Request) -> Any:
        return orjson.loads(request.content) if request.content else None

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self._routes:
            return json_response(404, {'message': f'No route for {key}'})

        responders = self._routes[key]
        index = min(self._hits[key], len(responders) - 1)
        self._hits[key] += 1
        responder = responders[index]

        if isinstance(responder, Exception):
            raise responder
        if isinstance(responder, httpx.Response):
            # Fresh copy: a scripted response may be served more than once
            return httpx.Response(
                responder.status_code, headers=responder.headers, content=responder.content
            )
        result = responder(request)
        if isawaitable(result):
            result = await result
        return result

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle), base_url=BASE_URL)


class RecordingNotificationSink:
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, message: str, kind: NotificationKind) -> None:
        self.notifications.append(Notification(message=message, kind=kind))

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def messages(self, kind: NotificationKind) -> list[str]:
        return [n.message for n in self.notifications if n.kind is kind]


async def log_in(
    session_manager: Any, remote: FakeRemote, *, role: str = 'user', token: str = 'token-abc'
) -> Any:
    remote.on(
        'POST',
        '/auth/login',
        json_response(200, {'token': token, 'user': user_payload(role=role)}),
    )
    return await session_manager.login(email='alice@example.com', password='correct-horse')
