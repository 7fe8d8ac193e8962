"""
Resolving request paths to files under the assets root.

Every lookup is confined to the (canonical) assets root: the request path is
joined with werkzeug's ``safe_join``, which rejects ``..`` segments and absolute
components, and the symlink-resolved result must still lie inside the root.
Anything that fails those checks is treated like a missing file.
"""

import logging
import mimetypes
from pathlib import Path

from werkzeug.security import safe_join

from .constants import FALLBACK_DOCUMENT, FALLBACK_MIMETYPE, MIMETYPES
from .exceptions import AssetsNotFoundError

logger = logging.getLogger(__name__)


def check_assets_root(assets_dir: Path) -> Path:
    """Validate the assets root at startup and return its canonical path.

    Raises:
        AssetsNotFoundError: if the directory or its fallback document is missing.
    """
    root = Path(assets_dir).resolve()
    if not root.is_dir():
        raise AssetsNotFoundError(root, "Assets directory not found")
    if not (root / FALLBACK_DOCUMENT).is_file():
        raise AssetsNotFoundError(
            root / FALLBACK_DOCUMENT, "Fallback document not found"
        )
    return root


def resolve_asset(root: Path, request_path: str) -> Path | None:
    """Map a URL path onto a regular file under ``root``.

    ``root`` must already be canonical (see :func:`check_assets_root`).
    Directories resolve to their ``index.html`` if they have one.
    Returns None when nothing under the root matches.
    """
    joined = safe_join(str(root), request_path.lstrip("/"))
    if joined is None:
        logger.debug(f"Rejected unsafe path: {request_path!r}")
        return None

    try:
        path = Path(joined)
        if path.is_dir():
            path = path / FALLBACK_DOCUMENT

        path = path.resolve()
        if not path.is_relative_to(root):
            logger.debug(f"Rejected path escaping assets root: {request_path!r}")
            return None
        if not path.is_file():
            return None
    except (OSError, ValueError) as e:
        # names the filesystem refuses (too long, embedded NUL) can't match a file
        logger.debug(f"Unresolvable path {request_path!r}: {e}")
        return None
    return path


def guess_mimetype(path: Path) -> str:
    """Content type for a file, based on its extension."""
    suffix = path.suffix.lower()
    if suffix in MIMETYPES:
        return MIMETYPES[suffix]
    mimetype, _ = mimetypes.guess_type(path.name)
    return mimetype or FALLBACK_MIMETYPE
