import requests

from utils.response import Success, TransientFailure, FatalMismatch


def download(path, config, logger=None):
    """
    Fetch one directory page from the remote listing site.

    Args:
        path (str): Root-relative directory path, starting with '/'.
        config (Config): A Config object containing the crawler configuration.
        logger (logging.Logger, optional): The logger to use for diagnostics. Defaults to None.

    Returns:
        Response: Success, TransientFailure or FatalMismatch.
    """
    url = config.base_url + path
    headers = {
        "User-Agent": config.user_agent
    }

    try:
        resp = requests.get(url, headers=headers, timeout=config.timeout)
    except requests.exceptions.RequestException as e:
        if logger:
            logger.warning(f"Error downloading {url}: {e}")
        return TransientFailure(path, error=str(e))

    if resp.status_code != 200:
        if logger:
            logger.info(f"Got status <{resp.status_code}> for {url}.")
        return TransientFailure(path, status=resp.status_code)

    content_type = resp.headers.get("Content-Type", "")
    if not content_type.lower().startswith("text/html"):
        return FatalMismatch(path, resp.status_code, content_type)

    return Success(path, resp.status_code, resp.text)
