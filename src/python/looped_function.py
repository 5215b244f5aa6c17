import asyncio
import functools
import time
from typing import Any, Callable, Optional


def _calc_overshoot(
    last_finish_time: float, period: float, last_overshoot: float
) -> float:
    additional_overshoot = time.perf_counter() - last_finish_time
    # Limit adjustment for consistency.
    abs_adjustment = min(abs(additional_overshoot) * 0.3, period / 4)
    adjustment = abs_adjustment if additional_overshoot >= 0 else -abs_adjustment
    return last_overshoot + adjustment


async def _run_func(func: Callable, delta_time: float, is_coro: bool) -> Any:
    return await func(delta_time) if is_coro else func(delta_time)


async def loop_function(func: Callable[[float], Any], frequency: float) -> Any:
    """Loops the function at the target frequency, passing it the measured duration
    (seconds) since the start of the previous cycle. The first cycle is passed the
    nominal period. Stops and returns the first output that is not None.
    """
    overshoot = 0.0
    period = 1 / frequency
    finish_time: Optional[float] = None
    start_time: Optional[float] = None
    is_coro = asyncio.iscoroutinefunction(functools._unwrap_partial(func))  # type: ignore[attr-defined]

    while True:
        if finish_time is not None:
            overshoot = _calc_overshoot(finish_time, period, overshoot)

        now = time.perf_counter()
        delta_time = now - start_time if start_time is not None else period
        start_time = now
        finish_time = now + period
        if (output := await _run_func(func, delta_time, is_coro)) is not None:
            return output

        remaining_time = finish_time - time.perf_counter()
        # Sleep time is based off the current remaining time minus our estimated
        # overshoot from other processes running. We always sleep a small minimum time
        # to allow the scheduler to release this looped function.
        sleep_time = max(remaining_time - overshoot, 1e-5)
        await asyncio.sleep(sleep_time)
