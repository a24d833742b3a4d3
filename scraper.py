import re
from html import unescape
from posixpath import basename, splitext
from urllib.parse import urljoin, urlparse

from utils.errors import ListingFormatError

ROW_PATTERN = re.compile(r"<tr\b[^>]*>(.*?)</tr\s*>", re.IGNORECASE | re.DOTALL)
CELL_PATTERN = re.compile(r"<td\b[^>]*>(.*?)</td\s*>", re.IGNORECASE | re.DOTALL)
IMG_SRC_PATTERN = re.compile(
    r"<img\b[^>]*?\bsrc\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)
HREF_PATTERN = re.compile(
    r"<a\b[^>]*?\bhref\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)

CELLS_PER_ROW = 4

# icon file names (extension ignored) used by the listing server; the file
# glyphs cover the stock Apache httpd-autoindex.conf vocabulary
PARENT_ICONS = {"back", "parent"}
DIRECTORY_ICONS = {"folder", "folder.open", "folder.sec", "dir"}
FILE_ICONS = {
    "file", "text", "unknown", "generic", "generic.red", "generic.sec",
    "binary", "binhex", "compressed", "tar", "diskimg", "patch",
    "image", "image1", "image2", "image3", "layout", "movie",
    "sound", "sound1", "sound2", "pdf", "ps", "script", "doc",
    "a", "c", "f", "p", "tex", "dvi", "uu", "uuencoded", "world1", "world2",
    "bomb", "hand.right", "quill", "index", "link", "portal", "transfer",
    "box1", "box2", "broken", "burst", "comp.blue", "comp.gray",
}
# OpenDocument glyphs: odf6odt, odf6ods, ...
FILE_ICON_PREFIXES = ("odf6",)

PARENT = "parent"
DIRECTORY = "directory"
FILE = "file"


def scraper(path, body, host=None):
    """
    Extracts the links of one listing page.

    Parameters:
        path (str): directory path the page was fetched from
        body (str): html of the listing page
        host (str): netloc of the listing site; absolute links must point at it

    Returns:
        list: (path, is_directory) tuples in row order, parent links excluded
    """
    return list(iter_links(path, body, host))


def iter_links(path, body, host=None):
    """
    Lazily yield (path, is_directory) for every row of a listing page.

    Raises:
        ListingFormatError: a row breaks the four-column layout, carries an
            unknown icon, has no link or links to another host.
    """
    for cells in extract_rows(body):
        if not cells:
            continue
        if len(cells) != CELLS_PER_ROW:
            raise ListingFormatError(
                f"{path}: expected {CELLS_PER_ROW} cells in row, found {len(cells)}")

        icon_cell, link_cell = cells[0], cells[1]
        kind = classify_icon(icon_cell)
        if kind == PARENT:
            continue

        href = HREF_PATTERN.search(link_cell)
        if href is None:
            raise ListingFormatError(f"{path}: no link in cell {link_cell!r}")
        yield resolve_href(path, href.group(1), host), kind == DIRECTORY


def extract_rows(body):
    """
    Split a page into rows of trimmed <td> bodies, in document order.

    Rows made only of <th> cells come back as empty lists.
    """
    return [
        [cell.strip() for cell in CELL_PATTERN.findall(row)]
        for row in ROW_PATTERN.findall(body)
    ]


def classify_icon(icon_cell):
    """
    Classify a row by the file name of the image in its icon cell.

    Returns:
        str: PARENT, DIRECTORY or FILE
    """
    match = IMG_SRC_PATTERN.search(icon_cell)
    if match is None:
        raise ListingFormatError(f"no icon in cell {icon_cell!r}")

    name = basename(urlparse(unescape(match.group(1))).path)
    stem = splitext(name)[0].lower()
    if stem in PARENT_ICONS:
        return PARENT
    if stem in DIRECTORY_ICONS:
        return DIRECTORY
    if stem in FILE_ICONS or stem.startswith(FILE_ICON_PREFIXES):
        return FILE
    raise ListingFormatError(f"unrecognized icon {name!r}")


def resolve_href(path, href, host=None):
    """
    Turn a link target into a root-relative path, resolving it against the
    directory it was found in. Query and fragment are dropped.

    Raises:
        ListingFormatError: the link is absolute and its host is not `host`
            (with no `host` given, any absolute link).
    """
    target = urlparse(urljoin(path, unescape(href)))
    if target.netloc and target.netloc.lower() != (host or "").lower():
        raise ListingFormatError(f"{path}: link {href!r} leaves the listing site")
    return target.path
