import pytest
from httpspec import Spec, SpecBuilder, Expect, Path, StatusMismatch, decode_body
from conftest import MockExecutor, MockRunner, Todo


@pytest.mark.asyncio
async def test_executor_runs_spec(todo):
    spec = SpecBuilder(Expect(201), Expect(lambda r, b: None)).build()
    executor = MockExecutor(todo, status=201)
    await executor.run(spec)
    assert len(executor.calls) == 1


@pytest.mark.asyncio
async def test_executor_runs_builder(todo):
    executor = MockExecutor(todo, status=201)
    await executor.run(SpecBuilder(Path("todos"), Expect(201)))
    assert executor.calls[0][0].path == "todos"


@pytest.mark.asyncio
async def test_executor_runs_directives(todo):
    executor = MockExecutor(todo, status=201)
    await executor.run([Path("todos"), Expect(201)])
    await executor.run(Expect(201))
    assert len(executor.calls) == 2


@pytest.mark.asyncio
async def test_executor_rejects_unknown_target(todo):
    with pytest.raises(TypeError):
        await MockExecutor(todo).run("todos")


@pytest.mark.asyncio
async def test_runner_shares_one_executor(todo):
    runner = MockRunner(todo)
    await runner.run(Spec().get("a"), SpecBuilder(Path("b")), [Path("c")])
    assert len(runner.executors) == 1
    assert [req.path for req, _ in runner.executors[0].calls] == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_runner_stops_at_first_failing_spec(todo):
    runner = MockRunner(todo)
    with pytest.raises(StatusMismatch):
        await runner.run(Spec().get("a").expect(404), Spec().get("b"))
    assert [req.path for req, _ in runner.executors[0].calls] == ["a"]


@pytest.mark.asyncio
async def test_runner_test_returns_block_result(todo):
    async def block(executor):
        response, body = await executor.execute(Spec().request, b"")
        return decode_body(body, response, Todo)

    result = await MockRunner(todo).test(block)
    assert result == todo


@pytest.mark.asyncio
async def test_status_error_via_runner(todo):
    with pytest.raises(StatusMismatch) as exc:
        await MockRunner(todo).run(SpecBuilder(Expect(404)))
    assert exc.value.status == 200
