# radio/management/commands/add_track.py
from django.core.management.base import BaseCommand, CommandError
from radio.models import Track


class Command(BaseCommand):
    help = "Record a track as now playing (same as POST /api/track)"

    def add_arguments(self, parser):
        parser.add_argument("title")
        parser.add_argument("artist")

    def handle(self, title, artist, *args, **opts):
        if not title or not artist:
            raise CommandError("Title and artist are required")

        track = Track.objects.create(title=title, artist=artist)
        self.stdout.write(
            self.style.SUCCESS(f"now playing #{track.id}: {track.title} — {track.artist}")
        )
