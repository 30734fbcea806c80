from django.conf import settings
from django.db import models
from django.utils import timezone


class TrackQuerySet(models.QuerySet):
    def by_recency(self):
        # played_at ties fall back to insertion order
        return self.order_by("-played_at", "-id")

    def current(self):
        """Return the most recently played track, or None for an empty table."""
        return self.by_recency().first()

    def recent(self, limit=None):
        """
        Tracks played before the current one, newest first.

        The current track is always skipped so "recently played" never
        repeats what is on air now.
        """
        if limit is None:
            limit = settings.RADIO_RECENT_TRACKS_LIMIT
        return self.by_recency()[1:1 + limit]


class Track(models.Model):
    title = models.TextField()
    artist = models.TextField()
    played_at = models.DateTimeField(default=timezone.now)

    objects = TrackQuerySet.as_manager()

    class Meta:
        db_table = "tracks"
        indexes = [models.Index(fields=["played_at"], name="ix_tracks_played_at")]

    def __str__(self):
        return f"{self.title} — {self.artist}"

    @staticmethod
    def placeholder():
        """What the player shows while nothing has been played yet."""
        return {
            "title": settings.RADIO_PLACEHOLDER_TITLE,
            "artist": settings.RADIO_PLACEHOLDER_ARTIST,
        }


class Rating(models.Model):
    """
    A thumbs up (1) or thumbs down (-1) from one listener for one song.

    Songs are keyed by title and artist rather than by Track so that a song
    which comes round again on the stream keeps its ratings.
    """
    THUMBS_UP = 1
    THUMBS_DOWN = -1
    VALUES = (THUMBS_UP, THUMBS_DOWN)

    track_title = models.TextField()
    track_artist = models.TextField()
    user_fingerprint = models.CharField(max_length=16)
    rating = models.SmallIntegerField(
        choices=[(THUMBS_UP, "Thumbs up"), (THUMBS_DOWN, "Thumbs down")]
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "ratings"
        constraints = [
            models.UniqueConstraint(
                fields=["track_title", "track_artist", "user_fingerprint"],
                name="uq_ratings_song_listener",
            ),
            models.CheckConstraint(
                condition=models.Q(rating__in=[1, -1]),
                name="ck_ratings_thumbs",
            ),
        ]

    def __str__(self):
        thumb = "up" if self.rating == self.THUMBS_UP else "down"
        return f"{self.user_fingerprint} - {thumb} - {self.track_title}"


class Account(models.Model):
    name = models.TextField()
    email = models.TextField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} <{self.email}>"
