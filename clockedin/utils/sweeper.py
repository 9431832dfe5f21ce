from __future__ import annotations

import logging
import threading
from typing import Callable


def start_periodic(
    task: Callable[[], object],
    interval_s: float,
    label: str,
    logger: logging.Logger | None = None,
) -> Callable[[], None]:
    """Run ``task`` every ``interval_s`` seconds on a daemon thread.

    Returns a callable that stops the thread and waits for it to exit.
    A failing run is logged and the schedule carries on.
    """
    log = logger or logging.getLogger(__name__)
    stop_event = threading.Event()

    def _run() -> None:
        while not stop_event.wait(interval_s):
            try:
                task()
            except Exception as exc:  # noqa: BLE001
                log.error("Periodic task %s failed: %s", label, exc, exc_info=True)

    thread = threading.Thread(target=_run, name=f"periodic-{label}", daemon=True)
    thread.start()
    log.info("Started periodic task=%s interval=%ss", label, interval_s)

    def stop() -> None:
        stop_event.set()
        thread.join()

    return stop
