def assemble(files):
    """
    Sort and de-duplicate the discovered file paths.

    Args:
        files (iterable): file paths, possibly repeated

    Returns:
        list: the distinct paths in lexicographic order
    """
    return sorted(set(files))


def output_filename(start_path):
    """
    Derive the listing file name from the directory the crawl started at.

    '/' maps to listing.txt, '/pub/linux/' to listing_pub_linux.txt.
    """
    segments = [segment for segment in start_path.split("/") if segment]
    if not segments:
        return "listing.txt"
    return f"listing_{'_'.join(segments)}.txt"


def write_listing(filename, paths):
    """
    Write one path per line, replacing any previous file.
    """
    with open(filename, "w", encoding="utf-8") as f:
        for path in paths:
            f.write(f"{path}\n")
