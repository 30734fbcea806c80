"""
views.py – Radio Calico player page and album art

The player itself is static HTML + hls.js; the only server-side work here
is handing it the stream URL and serving the cover for the track on air.
"""

import logging

from django.conf import settings
from django.db import DatabaseError
from django.http import FileResponse, Http404
from django.shortcuts import render
from django.views.decorators.http import require_GET

from .models import Track
from .services.album_art import default_cover, resolve_album_art

_log = logging.getLogger("radio")

# The player busts its own cache with ?t=..., proxies must not either
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@require_GET
def player(request):
    return render(
        request,
        "player.html",
        {
            "stream_url": settings.RADIO_STREAM_URL,
            "poll_interval_ms": settings.RADIO_POLL_INTERVAL * 1000,
        },
    )


@require_GET
def album_art(request):
    """
    Image for the current track.

    Never fails because of the database: any storage error, or a chosen
    image that is missing on disk, falls back to the default cover.
    """
    try:
        track = Track.objects.current()
    except DatabaseError as exc:
        _log.error(f"Error fetching current track for album art: {exc}")
        path = default_cover()
    else:
        path = resolve_album_art(track)

    if not path.is_file():
        _log.warning(f"Album art {path.name} missing, serving default cover")
        path = default_cover()
        if not path.is_file():
            raise Http404("No album art available")

    response = FileResponse(path.open("rb"))
    for header, value in NO_CACHE_HEADERS.items():
        response[header] = value
    return response
