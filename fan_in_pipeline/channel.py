import threading
from typing import Any, Iterator

from .errors import ChannelClosedError

# marks an empty hand-off slot, None is a valid value to send
_EMPTY = object()


class Channel:
    """
    Unbuffered channel: a send only returns once a receiver has taken the value.

    Any number of threads may send and receive. Senders take turns on the hand-off
    slot, so at most one value is ever in flight between producers and the consumer.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._send_lock = threading.Lock()
        self._slot: Any = _EMPTY
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, value: Any) -> None:
        """Hand a value to a receiver, blocking until it has been taken."""
        with self._send_lock:
            with self._cond:
                if self._closed:
                    raise ChannelClosedError("send on closed channel")
                # offer the value
                self._slot = value
                self._cond.notify_all()
                # wait for a receiver to empty the slot
                while self._slot is not _EMPTY:
                    if self._closed:
                        # withdraw the value so it is not delivered after the close
                        self._slot = _EMPTY
                        raise ChannelClosedError("channel closed during send")
                    self._cond.wait()

    def receive(self) -> tuple[Any, bool]:
        """Return (value, True), or (None, False) once the channel is closed and drained."""
        with self._cond:
            while self._slot is _EMPTY and not self._closed:
                self._cond.wait()
            if self._slot is _EMPTY:
                return None, False
            value, self._slot = self._slot, _EMPTY
            # wake the sender waiting on the hand-off
            self._cond.notify_all()
            return value, True

    def close(self) -> None:
        """Close the channel and wake every waiting thread."""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        while True:
            value, ok = self.receive()
            if not ok:
                return
            yield value
