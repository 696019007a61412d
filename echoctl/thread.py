"""A worker thread driven by an event queue."""

from __future__ import annotations

import threading
from enum import Enum, auto

from echoctl.event_queue import Event, EventId, EventQueue


class ThreadState(Enum):
    UNINIT = auto()
    RUNNING = auto()
    QUIT = auto()
    STOPPED = auto()


class EventThread:
    """A thread that runs ``run`` and handles posted events until told to quit."""

    def __init__(self) -> None:
        self._state = ThreadState.UNINIT
        self._queue = EventQueue()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> ThreadState:
        return self._state

    def thread_id(self) -> int | None:
        """Return the identifier of the running thread, or None."""
        thread = self._thread
        return thread.ident if thread is not None else None

    def is_running(self) -> bool:
        return self._state is ThreadState.RUNNING

    def is_quitted(self) -> bool:
        return self._state is ThreadState.QUIT

    def is_stopped(self) -> bool:
        return self._state is ThreadState.STOPPED

    def start(self) -> None:
        """Start the thread; does nothing if it was started before."""
        with self._lock:
            if self._thread is not None or self._state is not ThreadState.UNINIT:
                return
            self._state = ThreadState.RUNNING
            self._thread = threading.Thread(
                target=self._inner_run, name=type(self).__name__, daemon=True
            )
            thread = self._thread
        thread.start()

    def quit(self) -> None:
        """Ask a running thread to stop by posting a quit event."""
        with self._lock:
            if self._thread is None or self._state is not ThreadState.RUNNING:
                return
            self._state = ThreadState.QUIT
        self.post_event(Event(EventId.QUIT))

    def join(self) -> None:
        """Wait for the thread to finish and forget it."""
        thread = self._thread
        if thread is None:
            return
        if thread.is_alive() and thread is not threading.current_thread():
            thread.join()
        if not thread.is_alive():
            self._thread = None

    def _inner_run(self) -> None:
        try:
            self.run()
        finally:
            with self._lock:
                self._state = ThreadState.STOPPED

    def post_event(self, event: Event | int) -> None:
        """Queue an event (or an event id) for the thread."""
        self._queue.post(event)

    def peek_event(self) -> Event | None:
        return self._queue.peek()

    def pop_event(self) -> Event:
        """Remove the next event, waiting for one if the queue is empty."""
        return self._queue.pop()

    def run(self) -> None:
        """Handle events until one of them asks to stop."""
        while self.process_event(True):
            pass

    def on_event(self, event: Event) -> bool:
        """Handle one event; return False to stop the thread."""
        return event.event_id != EventId.QUIT

    def process_event(self, block: bool = True) -> bool:
        """Handle the next event if there is one; return False to stop."""
        event = self._queue.pop(timeout=None if block else 0)
        if event is not None:
            return self.on_event(event)
        return True

    def __enter__(self) -> EventThread:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.quit()
        self.join()