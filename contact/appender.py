import logging
import queue
import threading
import uuid
from pathlib import Path

from django.conf import settings

from contact.serializers import SubmissionRecordSerializer

logger = logging.getLogger("django")


class RecordAppender:
    """
    Appends submission records to a flat file from a background writer thread.

    ``append`` only queues the record, so callers never wait for the disk.
    A single writer per file keeps concurrent submissions from interleaving
    their lines. Write failures are logged and dropped, never retried.
    """

    def __init__(self, path):
        self.path = Path(path)
        self.queue = queue.Queue()
        self.shutdown_event = threading.Event()
        self.lock = threading.Lock()
        self.thread = None
        self.running = False
        self.poll_interval = 0.5

    def _start_worker(self):
        # Caller holds self.lock.
        if self.running:
            return
        self.shutdown_event.clear()
        self.running = True
        self.thread = threading.Thread(
            target=self.worker, name=f"RecordWriter-{uuid.uuid4()}"
        )
        self.thread.daemon = True
        self.thread.start()
        logger.info(f"Started {self.thread.name} for {self.path}")

    def append(self, record):
        # Starting and queueing under one lock: the writer only exits once it
        # has seen an empty queue under the same lock.
        with self.lock:
            self._start_worker()
            self.queue.put(record)

    def worker(self):
        while True:
            try:
                record = self.queue.get(timeout=self.poll_interval)
            except queue.Empty:
                if self.shutdown_event.is_set():
                    with self.lock:
                        if self.queue.empty():
                            self.running = False
                            break
                continue
            try:
                self.write(record)
            except Exception as e:
                logger.error(f"Unexpected error writing submission: {e}", exc_info=True)
            finally:
                self.queue.task_done()

    def write(self, record):
        line = SubmissionRecordSerializer(record).to_line()
        try:
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error(f"Could not append submission to {self.path}: {e}", exc_info=True)
            return False
        logger.debug(f"Appended submission to {self.path}")
        return True

    def flush(self, timeout=None):
        """
        Block until every queued record has been written or has failed.

        Returns False if ``timeout`` seconds pass first.
        """
        with self.queue.all_tasks_done:
            return self.queue.all_tasks_done.wait_for(
                lambda: not self.queue.unfinished_tasks, timeout
            )

    def stop(self):
        with self.lock:
            self.shutdown_event.set()
            thread = self.thread
        if thread is not None:
            thread.join()
            logger.info(f"Stopped {thread.name}")


_appenders = {}
_registry_lock = threading.Lock()


def get_appender(path=None):
    """Return the shared appender for ``path``, defaulting to the configured file."""
    key = str(Path(path or settings.CONTACT_SUBMISSIONS_FILE).resolve())
    with _registry_lock:
        appender = _appenders.get(key)
        if appender is None:
            appender = _appenders[key] = RecordAppender(key)
    return appender


def stop_appenders():
    with _registry_lock:
        appenders = list(_appenders.values())
    for appender in appenders:
        appender.stop()
