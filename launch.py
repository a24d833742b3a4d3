import logging
import sys
from configparser import ConfigParser
from argparse import ArgumentParser, ArgumentTypeError

from utils import get_logger, set_console_level
from utils.config import Config
from utils.errors import CrawlAborted
from crawler import Crawler
from crawler.listing import output_filename, write_listing


class UsageParser(ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def remote_directory(value):
    if not value.startswith("/"):
        raise ArgumentTypeError(f"remote directory must start with '/': {value!r}")
    return value


def build_parser():
    parser = UsageParser(
        description="Crawl a remote directory listing and write every file path it contains.")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="only log warnings and errors to the console")
    parser.add_argument("--config_file", type=str, default="config.ini")
    parser.add_argument("start_path", nargs="?", type=remote_directory, default="/",
                        help="remote directory to start from (default: /)")
    return parser


def main(config_file, start_path="/", quiet=False):
    """
    Main function of the crawler.

    Args:
        config_file (str): Path to the configuration file.
        start_path (str): Remote directory to start crawling from.
        quiet (bool): Only log warnings and errors to the console.

    Returns:
        int: The process exit status.
    """
    if quiet:
        set_console_level(logging.WARNING)
    logger = get_logger("CRAWLER")

    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)
    crawler = Crawler(config, start_path)
    try:
        files = crawler.start()
    except CrawlAborted as e:
        logger.error(f"{e}. No listing written.")
        return 1

    filename = output_filename(start_path)
    write_listing(filename, files)
    logger.info(f"Wrote {len(files)} file paths to {filename}.")
    return 0


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(main(args.config_file, args.start_path, args.quiet))
