# radio/services/album_art.py
"""
Album art for the track on air
------------------------------

* Per-track art lives in RADIO_COVERS_DIR as "<title>_<artist>.jpg" with
  every character outside [A-Za-z0-9_] turned into "_"
* Without one, a placeholder is picked from RADIO_FALLBACK_COVERS by
  track id so consecutive tracks do not all show the same image
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final, Optional

from django.conf import settings

from radio.models import Track

logger = logging.getLogger("radio")

_INVALID: Final = re.compile(r"[^A-Za-z0-9_]")


def cover_filename(title: str, artist: str) -> str:
    """
    >>> cover_filename("Don't Stop", "Fleetwood Mac")
    'Don_t_Stop_Fleetwood_Mac.jpg'
    """
    return _INVALID.sub("_", f"{title}_{artist}") + ".jpg"


def default_cover() -> Path:
    return Path(settings.RADIO_ART_DIR) / settings.RADIO_DEFAULT_COVER


def fallback_cover(track: Optional[Track]) -> Path:
    covers = settings.RADIO_FALLBACK_COVERS
    index = track.id % len(covers) if track is not None and track.id else 0
    return Path(settings.RADIO_ART_DIR) / covers[index]


def resolve_album_art(track: Optional[Track]) -> Path:
    """
    Pick the image to show for *track*.

    The returned path is not guaranteed to exist; callers fall back to
    default_cover() when it does not.
    """
    if track is not None and track.title and track.artist:
        filename = cover_filename(track.title, track.artist)
        logger.debug(f"Looking for album art: {filename}")
        specific = Path(settings.RADIO_COVERS_DIR) / filename
        if specific.is_file():
            logger.debug(f"Found specific album art for {track.title} by {track.artist}")
            return specific

    cover = fallback_cover(track)
    logger.debug(
        f"Using fallback album art: {cover.name} "
        f"for track {track.title if track is not None else 'unknown'}"
    )
    return cover
