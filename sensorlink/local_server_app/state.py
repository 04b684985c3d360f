import itertools
import logging
import threading
from collections import OrderedDict, deque
from typing import Deque, Dict, List, Optional

from sensorlink.local_server_app.config import ServerSettings
from sensorlink.local_server_app.logging import create_logger, ring_buffer
from sensorlink.parsing.payload import PayloadSnapshot

# Snapshots sent without a device id are kept under this key.
ANONYMOUS_DEVICE = "_anonymous"

_instance_ids = itertools.count(1)


class LocalServerState:
    def __init__(self, settings: ServerSettings, logger: Optional[logging.Logger] = None):
        self.settings = settings
        # Each state owns its logger and ring buffer.
        self.logger = logger or create_logger(
            f"sensorlink.local_server.{next(_instance_ids)}", settings.log_ring_size
        )
        self._history: "OrderedDict[str, Deque[PayloadSnapshot]]" = OrderedDict()
        self._lock = threading.Lock()

    def log(self, event: str, details: Optional[dict] = None, level: int = logging.INFO) -> None:
        self.logger.log(level, event, extra={"details": details or {}})

    def record(self, snapshot: PayloadSnapshot) -> None:
        key = snapshot.device_id or ANONYMOUS_DEVICE
        evicted = None
        with self._lock:
            history = self._history.get(key)
            if history is None:
                history = deque(maxlen=self.settings.history_size)
                self._history[key] = history
            self._history.move_to_end(key)
            history.append(snapshot)
            if len(self._history) > self.settings.max_devices:
                evicted, _ = self._history.popitem(last=False)
        if evicted is not None:
            self.log("device_evicted", {"device_id": evicted})

    def latest(self, device_id: str) -> Optional[PayloadSnapshot]:
        with self._lock:
            history = self._history.get(device_id)
            return history[-1] if history else None

    def history(self, device_id: str) -> List[PayloadSnapshot]:
        with self._lock:
            return list(self._history.get(device_id, ()))

    def devices(self) -> List[str]:
        with self._lock:
            return list(self._history)

    def events(self) -> List[Dict]:
        handler = ring_buffer(self.logger)
        return handler.get_events() if handler else []
