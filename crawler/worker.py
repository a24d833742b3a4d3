from threading import Thread

from utils.download import download
from utils.errors import ContentTypeMismatch, ListingFormatError
from utils.response import FatalMismatch, TransientFailure
from utils import get_logger
import scraper


class Worker(Thread):
    """
    The Worker class is a subclass of Thread that downloads directory pages
    from the Frontier and folds the links it finds back into it. Each Worker
    instance runs concurrently in a separate thread.

    Attributes:
        config (Config): A Config object containing the crawler configuration.
        frontier (Frontier): The Frontier shared by every worker of the crawl.
    """

    def __init__(self, worker_id, config, frontier):
        """
        Initialize the Worker with the given worker_id, configuration, and frontier.

        Args:
            worker_id (int): A unique identifier for the worker.
            config (Config): A Config object containing the crawler configuration.
            frontier (Frontier): The Frontier shared by every worker of the crawl.
        """
        self.logger = get_logger(f"Worker-{worker_id}", "WORKER")
        self.config = config
        self.frontier = frontier
        super().__init__(name=f"Worker-{worker_id}", daemon=True)

    def run(self):
        """
        Run the worker loop until the frontier is quiescent or the crawl is aborted.
        """
        while True:
            tbd_path = self.frontier.get_tbd_path()
            if tbd_path is None:
                self.logger.debug("Nothing left to claim. Stopping.")
                break

            try:
                if not self.process(tbd_path):
                    break
            except Exception as e:
                # the path would otherwise stay in flight forever
                self.logger.exception(f"Unexpected error while processing {tbd_path}.")
                self.frontier.abort(e)
                break

    def process(self, tbd_path):
        """
        Fetch one directory and record what it links to.

        Returns:
            bool: False if the crawl had to be aborted
        """
        resp = download(tbd_path, self.config, self.logger)

        if isinstance(resp, TransientFailure):
            self.logger.info(f"Retrying {tbd_path} later, {resp.reason}.")
            self.frontier.release_transient(tbd_path)
            return True

        if isinstance(resp, FatalMismatch):
            error = ContentTypeMismatch(tbd_path, resp.content_type)
            self.logger.error(str(error))
            self.frontier.abort(error)
            return False

        try:
            links = scraper.scraper(tbd_path, resp.body, self.config.host)
        except ListingFormatError as e:
            self.logger.error(f"Malformed listing at {tbd_path}: {e}")
            self.frontier.abort(e)
            return False

        new_dirs = 0
        for path, is_directory in links:
            if is_directory:
                new_dirs += self.frontier.offer_directory(path)
            else:
                self.frontier.offer_file(path)
        self.logger.info(
            f"Downloaded {tbd_path}, {len(links)} links, {new_dirs} new directories.")
        self.frontier.complete_visit(tbd_path)
        return True
