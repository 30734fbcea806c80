from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from django.db import DatabaseError, transaction
import logging

from radio.models import Track, Account
from radio.api.serializers import (
    TrackSerializer,
    TrackCreateSerializer,
    AccountSerializer,
    AccountCreateSerializer,
)

logger = logging.getLogger("radio")


def storage_error(exc):
    """500 response carrying the database error message as-is."""
    logger.error(f"Storage error: {exc}")
    return Response(
        {"error": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


class CurrentTrackAPIView(APIView):
    """The track on air, or a placeholder when nothing has been played."""

    def get(self, request):
        logger.info("API: /api/current-track requested")
        try:
            track = Track.objects.current()
        except DatabaseError as e:
            return storage_error(e)

        if track is None:
            return Response({'track': Track.placeholder()})
        return Response({'track': TrackSerializer(track).data})


class RecentTracksAPIView(APIView):
    """Up to five tracks played before the current one."""

    def get(self, request):
        logger.info("API: /api/recent-tracks requested")
        try:
            tracks = list(Track.objects.recent())
        except DatabaseError as e:
            return storage_error(e)

        return Response({'tracks': TrackSerializer(tracks, many=True).data})


class TrackCreateAPIView(APIView):
    """
    Record a new track as now playing.

    POST /api/track
    {
        "title": "Steady, As She Goes",
        "artist": "The Raconteurs"
    }
    """

    def post(self, request):
        serializer = TrackCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Title and artist are required"},
                status=status.HTTP_400_BAD_REQUEST
            )

        title = serializer.validated_data['title']
        artist = serializer.validated_data['artist']
        try:
            with transaction.atomic():
                track = Track.objects.create(title=title, artist=artist)
        except DatabaseError as e:
            return storage_error(e)

        logger.info(f"Track added: {title} / {artist} (id {track.id})")
        return Response({'id': track.id, 'title': title, 'artist': artist})


class AccountsAPIView(APIView):
    """Listener accounts. Not used by the player itself."""

    def get(self, request):
        try:
            accounts = list(Account.objects.all())
        except DatabaseError as e:
            return storage_error(e)

        return Response({'users': AccountSerializer(accounts, many=True).data})

    def post(self, request):
        serializer = AccountCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Name and email are required"},
                status=status.HTTP_400_BAD_REQUEST
            )

        name = serializer.validated_data['name']
        email = serializer.validated_data['email']
        try:
            # a duplicate email surfaces as an IntegrityError from the store
            with transaction.atomic():
                account = Account.objects.create(name=name, email=email)
        except DatabaseError as e:
            return storage_error(e)

        return Response({'id': account.id, 'name': name, 'email': email})
