"""Page file discovery.

Finds every page file under the pages directory.  The compiler never
touches the filesystem itself; callers pass it this list.
"""

from pathlib import Path


def discover_page_files(pages_dir: str | Path, extension: str = ".vue") -> list[str]:
    """Return the sorted absolute paths of all page files under *pages_dir*.

    Args:
        pages_dir: Path to the pages directory.
        extension: Page file extension (e.g. ``".vue"``).

    Raises:
        FileNotFoundError: If *pages_dir* is not a directory.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    return sorted(str(path) for path in root.rglob(f"*{extension}") if path.is_file())
