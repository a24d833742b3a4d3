from collections import deque
from threading import Condition, RLock

from utils import get_logger


class Frontier(object):
    """
    Shared traversal state for one crawl.

    Attributes:
        pending (deque): directory paths waiting to be fetched, FIFO
        in_flight (set): directory paths some worker is fetching right now
        discovered (set): every directory path ever scheduled, only grows
        files (list): file paths found so far, duplicates allowed
        error (Exception): first fatal error reported by a worker, or None
        lock (RLock): guards all of the above
        changed (Condition): signalled whenever a waiting worker might proceed

    Every element of pending and in_flight is in discovered, and the two never
    overlap. The crawl is over when both are empty.
    """
    def __init__(self, config, start_path="/"):
        """
        Initialize Frontier.

        Parameters:
            config (Config): configuration instance
            start_path (str): directory the crawl starts from
        """
        self.logger = get_logger("FRONTIER")
        self.config = config
        self.lock = RLock()
        self.changed = Condition(self.lock)
        self.pending = deque()
        self.in_flight = set()
        self.discovered = set()
        self.files = []
        self.error = None

        self.offer_directory(start_path)

    def claim_next(self):
        """
        Take the next pending path and mark it in flight.

        Returns:
            str: the claimed path, or None if nothing is pending
        """
        with self.lock:
            if not self.pending:
                return None
            path = self.pending.popleft()
            self.in_flight.add(path)
            return path

    def get_tbd_path(self):
        """
        Block until a path can be claimed.

        Returns:
            str: the claimed path, or None once the frontier is quiescent or
                the crawl was aborted
        """
        with self.changed:
            while True:
                if self.error is not None:
                    return None
                path = self.claim_next()
                if path is not None:
                    return path
                if self.is_quiescent():
                    return None
                self.changed.wait(self.config.poll_interval)

    def release_transient(self, path):
        """
        Put a path that failed to download back at the tail of the queue.

        Parameters:
            path (str): a path currently in flight
        """
        with self.changed:
            self.in_flight.discard(path)
            self.pending.append(path)
            self.changed.notify_all()

    def complete_visit(self, path):
        """
        Mark a path as fully processed.

        Parameters:
            path (str): a path currently in flight
        """
        with self.changed:
            if path not in self.in_flight:
                self.logger.error(f"Completed {path}, but it was not in flight.")
            self.in_flight.discard(path)
            if self.is_quiescent():
                self.logger.info(
                    f"Frontier quiescent after {len(self.discovered)} directories.")
                self.changed.notify_all()

    def offer_directory(self, path):
        """
        Schedule a directory unless it was seen before.

        Parameters:
            path (str): directory path found on a listing page

        Returns:
            bool: True if the path was newly scheduled
        """
        with self.changed:
            if path in self.discovered:
                return False
            self.discovered.add(path)
            self.pending.append(path)
            self.changed.notify_all()
            return True

    def offer_file(self, path):
        with self.lock:
            self.files.append(path)

    def is_quiescent(self):
        with self.lock:
            return not self.pending and not self.in_flight

    def abort(self, error):
        """
        Record a fatal error and wake every waiting worker. Only the first
        error is kept.
        """
        with self.changed:
            if self.error is None:
                self.error = error
            self.changed.notify_all()

    def get_files(self):
        with self.lock:
            return list(self.files)

    def get_discovered(self):
        with self.lock:
            return set(self.discovered)
