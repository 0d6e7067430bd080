"""Conventional icon locations tried at the root of a site"""

from iconfetcher.constants import CONVENTIONAL_ICON_FILENAMES
from iconfetcher.models import IconCandidate
from iconfetcher.utils.url_utils import parse_filename_size


def generate_candidates(host: str) -> list[IconCandidate]:
    """Return one candidate per conventional icon filename at `https://{host}/`.

    Each candidate is classified by its filename, so apple-touch-icon files are
    ranked like scanned apple-touch-icon links.
    """
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    root_url = f"https://{host}/"

    return [
        IconCandidate(
            href=f"{root_url}{filename}",
            rel=filename,
            size=parse_filename_size(filename),
        )
        for filename in CONVENTIONAL_ICON_FILENAMES
    ]
