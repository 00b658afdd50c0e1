import pytest
import msgspec
from httpspec import Executor, Runner, HttpResponse


class Todo(msgspec.Struct):
    title: str


JSON_HEADERS = (("content-type", "application/json; charset=utf-8"), ("content-length", "18"))


class MockExecutor(Executor):
    def __init__(self, todo: Todo, status: int = 200, headers=JSON_HEADERS, error: Exception | None = None):
        self.todo = todo
        self.status = status
        self.headers = tuple(headers)
        self.error = error
        self.calls = []

    async def execute(self, request, body):
        self.calls.append((request, body))
        if self.error is not None:
            raise self.error
        return HttpResponse(status=self.status, headers=self.headers), msgspec.json.encode(self.todo)


class MockRunner(Runner):
    def __init__(self, todo: Todo, **kwargs):
        self.todo = todo
        self.kwargs = kwargs
        self.executors = []

    async def test(self, block):
        executor = MockExecutor(self.todo, **self.kwargs)
        self.executors.append(executor)
        return await block(executor)


class TodoApp:
    """Minimal ASGI app: GET/POST /todos."""

    def __init__(self):
        self.todos: list[dict] = []
        self.seen_headers: list[list[tuple[str, str]]] = []

    async def __call__(self, scope, receive, send):
        assert scope["type"] == "http"
        self.seen_headers.append([(k.decode(), v.decode()) for k, v in scope["headers"]])
        chunks = []
        while True:
            msg = await receive()
            chunks.append(msg.get("body", b""))
            if not msg.get("more_body", False):
                break
        raw = b"".join(chunks)

        if scope["path"] != "/todos":
            await self._json(send, {"error": "not found"}, 404)
        elif scope["method"] == "GET":
            await self._json(send, self.todos, 200)
        elif scope["method"] == "POST":
            todo = msgspec.json.decode(raw, type=dict)
            self.todos.append(todo)
            await self._json(send, todo, 201, extra=[[b"x-todo-count", str(len(self.todos)).encode()]])
        else:
            await self._json(send, {"error": "method not allowed"}, 405)

    async def _json(self, send, data, status, extra=None):
        body = msgspec.json.encode(data)
        headers = [
            [b"content-type", b"application/json"],
            [b"content-length", str(len(body)).encode()],
        ] + (extra or [])
        await send({"type": "http.response.start", "status": status, "headers": headers})
        await send({"type": "http.response.body", "body": body})


@pytest.fixture
def todo():
    return Todo(title="task01")


@pytest.fixture
def todo_body(todo):
    return msgspec.json.encode(todo)


@pytest.fixture
def todo_app():
    return TodoApp()
