from utils import get_logger
from utils.errors import CrawlAborted
from crawler.frontier import Frontier
from crawler.worker import Worker
from crawler.listing import assemble


class Crawler(object):
    def __init__(self, config, start_path="/", frontier_factory=Frontier, worker_factory=Worker):
        """
        This class implements a crawler that uses a frontier and a pool of workers
        to walk a directory-listing site and collect every file it links to.

        Args:
            config (obj): The configuration object that contains the settings for the
                crawler.
            start_path (str): The directory the crawl starts from, beginning with '/'.
            frontier_factory (func, optional): A function that creates an instance of the
                frontier class. The default is Frontier.
            worker_factory (func, optional): A function that creates an instance of the
                worker class. The default is Worker.

        Attributes:
            config (obj): The configuration object.
            logger (Logger): A logger instance for logging messages.
            frontier (Frontier): The frontier shared by all workers.
            workers (list): A list of worker threads that process paths from the frontier.
            worker_factory (func): A function that creates an instance of the worker
                class.
        """
        self.config = config
        self.start_path = start_path
        self.logger = get_logger("CRAWLER")
        self.frontier = frontier_factory(config, start_path)
        self.workers = list()
        self.worker_factory = worker_factory

    def start_async(self):
        """
        Starts the worker threads and returns immediately.
        """
        self.workers = [
            self.worker_factory(worker_id, self.config, self.frontier)
            for worker_id in range(self.config.threads_count)]
        for worker in self.workers:
            worker.start()
        self.logger.info(
            f"Started {len(self.workers)} workers at {self.config.base_url}{self.start_path}.")

    def start(self):
        """
        Run the whole crawl.

        Returns:
            list: the sorted, de-duplicated file paths

        Raises:
            CrawlAborted: a worker hit a fatal error
        """
        self.start_async()
        self.join()
        return self.results()

    def join(self):
        """
        Block until every worker has returned.

        Workers blocked in a fetch are not waited for once the crawl has been
        aborted; they are daemon threads.

        Raises:
            CrawlAborted: a worker hit a fatal error
        """
        for worker in self.workers:
            while worker.is_alive():
                self.check_aborted()
                worker.join(self.config.poll_interval)
        self.check_aborted()

    def check_aborted(self):
        error = self.frontier.error
        if error is not None:
            raise CrawlAborted(f"Crawl aborted: {error}") from error

    def results(self):
        return assemble(self.frontier.get_files())
