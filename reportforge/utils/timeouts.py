import threading
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, cast

P = ParamSpec("P")
T = TypeVar("T")


def call_with_timeout(
    timeout_seconds: float,
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> T:
    """Run ``func`` on a daemon thread and wait at most ``timeout_seconds``.

    On timeout the caller stops waiting and the thread is abandoned. It is a
    daemon, so a hung call never keeps the interpreter from exiting.

    Raises:
        TimeoutError: if ``func`` did not finish in time.
    """
    outcome: dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["result"] = func(*args, **kwargs)
        except BaseException as exc:
            outcome["error"] = exc

    worker = threading.Thread(target=target, name="reportforge-bounded", daemon=True)
    worker.start()
    worker.join(timeout_seconds)
    if worker.is_alive():
        raise TimeoutError(
            f"{getattr(func, '__name__', 'call')} did not finish within {timeout_seconds}s"
        )
    if "error" in outcome:
        raise outcome["error"]
    return cast(T, outcome["result"])
