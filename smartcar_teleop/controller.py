"""
Keyboard-to-velocity teleop loop.

Polls the terminal for single key presses, maps them to velocity commands
and hands them to a publish sink at a bounded rate.
"""
import os
import select
import threading
import time
from typing import Callable, Optional

from smartcar_teleop.config import Config, TeleopConfig
from smartcar_teleop.exceptions import PollError, ReadError, StartupError
from smartcar_teleop.keymap import map_key_to_command
from smartcar_teleop.terminal import TerminalRawModeGuard
from smartcar_teleop.types import ControllerState, PollResult, RateGate, VelocityCommand


class TeleopController:
    """Translates key presses into rate-limited velocity commands."""

    def __init__(
        self,
        config: TeleopConfig,
        publish: Callable[[VelocityCommand], None],
        input_fd: int = 0,
        clock: Callable[[], float] = time.monotonic,
        min_interval: float = Config.MIN_PUBLISH_INTERVAL,
        poll_timeout_ms: int = Config.POLL_TIMEOUT_MS,
        logger: Optional[Callable] = None
    ):
        """
        Initialize controller.

        Args:
            config: Velocity scales
            publish: Sink receiving each VelocityCommand
            input_fd: Terminal input file descriptor
            clock: Monotonic time source in seconds
            min_interval: Minimum seconds between two publishes
            poll_timeout_ms: Max time one poll blocks
            logger: Optional logger function
        """
        self.config = config
        self.publish = publish
        self.input_fd = input_fd
        self.clock = clock
        self.min_interval = min_interval
        self.poll_timeout_ms = poll_timeout_ms
        self.logger = logger or (lambda msg: None)

        self.state = ControllerState.IDLE
        self.rate_gate = RateGate()
        self.current_command = VelocityCommand.zero()
        self.last_poll_error: Optional[Exception] = None
        self._stopped = False

    # ==================== Input ====================

    def poll(self, timeout_ms: Optional[int] = None) -> PollResult:
        """
        Wait for a key to become readable.

        Args:
            timeout_ms: Max wait in milliseconds (default: poll_timeout_ms)

        Returns:
            READY, TIMED_OUT, or ERROR if select failed
        """
        if timeout_ms is None:
            timeout_ms = self.poll_timeout_ms

        try:
            readable, _, _ = select.select([self.input_fd], [], [], timeout_ms / 1000.0)
        except (OSError, ValueError) as e:
            self.last_poll_error = e
            self.logger(f'poll(): {e}')
            return PollResult.ERROR

        return PollResult.READY if readable else PollResult.TIMED_OUT

    def read_key(self) -> int:
        """
        Read exactly one byte from the terminal.

        Returns:
            Key code (0-255)

        Raises:
            ReadError: if the read fails or hits end-of-file
        """
        try:
            data = os.read(self.input_fd, 1)
        except OSError as e:
            raise ReadError(f'read(): {e}') from e

        if not data:
            raise ReadError('read(): end of file on terminal input')
        return data[0]

    # ==================== Output ====================

    def publish_if_due(
        self,
        command: VelocityCommand,
        rate_gate: Optional[RateGate] = None,
        min_interval: Optional[float] = None
    ) -> bool:
        """
        Publish command unless the last publish was too recent.

        Args:
            command: Command to send
            rate_gate: Gate to check and stamp (default: own gate)
            min_interval: Minimum seconds between publishes

        Returns:
            True if the command was published, False if dropped
        """
        gate = self.rate_gate if rate_gate is None else rate_gate
        interval = self.min_interval if min_interval is None else min_interval

        now = self.clock()
        if gate.elapsed(now) < interval - Config.CLOCK_TOLERANCE:
            return False

        self.publish(command)
        gate.last_publish = now
        return True

    def handle_key(self, key: int) -> bool:
        """
        Gate, map and publish one received key.

        Args:
            key: Received key code

        Returns:
            True if a command was published
        """
        self.state = ControllerState.GATING
        command = map_key_to_command(key, self.config)

        # Keys inside the window are dropped, not replayed
        if not self.publish_if_due(command):
            return False

        self.state = ControllerState.PUBLISHING
        self.current_command = command
        return True

    def stop(self) -> None:
        """Publish a single zero command. Later calls do nothing."""
        if self._stopped:
            return
        self._stopped = True
        self.current_command = VelocityCommand.zero()
        self.publish(self.current_command)

    # ==================== Loop ====================

    def run(self, stop_event: threading.Event) -> None:
        """
        Run the keyboard loop until stop_event is set or I/O fails.

        The terminal is restored before the final zero command is sent.

        Args:
            stop_event: Cancellation flag shared with the orchestration thread

        Raises:
            StartupError: terminal could not be switched to raw mode
            PollError: waiting for input failed
            ReadError: reading a ready key failed
            RestoreError: terminal settings could not be put back
        """
        guard = TerminalRawModeGuard(self.input_fd)
        try:
            guard.acquire()
        except StartupError:
            self.state = ControllerState.STOPPED
            raise

        try:
            with guard:
                self._loop(stop_event)
        finally:
            self.state = ControllerState.SHUTTING_DOWN
            self.stop()
            self.state = ControllerState.STOPPED

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            self.state = ControllerState.POLLING
            result = self.poll()

            if stop_event.is_set():
                break

            if result is PollResult.ERROR:
                raise PollError(f'poll(): {self.last_poll_error}')
            if result is PollResult.TIMED_OUT:
                continue

            key = self.read_key()
            self.handle_key(key)
