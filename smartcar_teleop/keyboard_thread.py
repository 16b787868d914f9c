"""Dedicated thread running the keyboard teleop loop."""
import threading
from typing import Optional

from smartcar_teleop.controller import TeleopController
from smartcar_teleop.exceptions import TeleopError


class KeyboardThread(threading.Thread):
    """Runs TeleopController.run until stop_event is set."""

    def __init__(self, controller: TeleopController, stop_event: threading.Event):
        super().__init__(name='keyboard_loop', daemon=True)
        self.controller = controller
        self.stop_event = stop_event
        self.error: Optional[TeleopError] = None

    def run(self):
        try:
            self.controller.run(self.stop_event)
        except TeleopError as e:
            self.error = e
        finally:
            # Wake the orchestration thread if the loop ended on its own
            self.stop_event.set()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal cancellation and wait for the loop to unwind."""
        self.stop_event.set()
        self.join(timeout)

    @property
    def failed(self) -> bool:
        """True if the loop ended on a fatal error."""
        return self.error is not None
