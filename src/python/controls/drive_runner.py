from typing import Optional

import geometry
import log
import looped_function

from controls import drive

# Number of control cycles between diagnostic dumps.
_LOG_EVERY_N_CYCLES = 50


class DriveRunner:
    """Runs the drive's control cycle at a fixed frequency, holding a single requested
    twist until the duration has elapsed.
    """

    def __init__(
        self, omni_drive: drive.Drive, target: geometry.Twist, duration: float
    ) -> None:
        self._drive = omni_drive
        self._target = target
        self._duration = duration

        self._elapsed = 0.0
        self._cycles = 0

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def cycles(self) -> int:
        return self._cycles

    async def run(self, frequency: float) -> geometry.Twist:
        """Runs until the duration has elapsed and returns the final measured twist."""
        log.info(
            f"Running drive at {frequency=}hz for {self._duration}s, "
            f"velocity={self._target.velocity.format()} spin={self._target.spin}°/s"
        )
        return await looped_function.loop_function(self.cycle, frequency)

    def cycle(self, delta_time: float) -> Optional[geometry.Twist]:
        """A single control cycle. Returns the measured twist once finished."""
        self._drive.step(delta_time)
        self._drive.set_target_velocities(self._target.velocity, self._target.spin)

        self._elapsed += delta_time
        self._cycles += 1
        if self._cycles % _LOG_EVERY_N_CYCLES == 0:
            log.debug(str(self._drive))

        if self._elapsed >= self._duration:
            log.info(f"Finished after {self._cycles} cycles\n{self._drive}")
            return self._drive.twist()

        return None
