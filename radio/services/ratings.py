"""
Thumbs up / thumbs down ratings
"""
from typing import Dict, Optional
import logging

from django.db.models import Count, Q
from django.utils import timezone

from radio.models import Rating

logger = logging.getLogger("radio")


def submit_rating(title: str, artist: str, fingerprint: str, rating: int) -> Rating:
    """
    Record a listener's rating for a song.

    At most one rating exists per (title, artist, fingerprint); rating
    again replaces the previous value instead of adding a second row.
    """
    if rating not in Rating.VALUES:
        raise ValueError(f"rating must be 1 or -1, got {rating!r}")

    obj, created = Rating.objects.update_or_create(
        track_title=title,
        track_artist=artist,
        user_fingerprint=fingerprint,
        defaults={"rating": rating, "created_at": timezone.now()},
    )
    logger.info(
        f"Rating {'created' if created else 'replaced'}: "
        f"{title} / {artist} = {rating} (listener {fingerprint})"
    )
    return obj


def rating_counts(title: str, artist: str) -> Dict[str, int]:
    """Count thumbs up and thumbs down for a song, zeros when unrated."""
    totals = Rating.objects.filter(track_title=title, track_artist=artist).aggregate(
        thumbs_up=Count("id", filter=Q(rating=Rating.THUMBS_UP)),
        thumbs_down=Count("id", filter=Q(rating=Rating.THUMBS_DOWN)),
    )
    return {
        "thumbs_up": totals["thumbs_up"] or 0,
        "thumbs_down": totals["thumbs_down"] or 0,
    }


def user_rating(title: str, artist: str, fingerprint: str) -> Optional[int]:
    return (
        Rating.objects.filter(
            track_title=title, track_artist=artist, user_fingerprint=fingerprint
        )
        .values_list("rating", flat=True)
        .first()
    )
