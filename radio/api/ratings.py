"""
Rating API endpoints
Thumbs up / down from anonymous listeners, identified by request fingerprint
"""

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from django.db import DatabaseError
import logging

from radio.api.serializers import RateSongSerializer, SongQuerySerializer
from radio.api.views import storage_error
from radio.services import ratings
from radio.services.fingerprint import user_fingerprint

logger = logging.getLogger("radio")

SONG_REQUIRED = "Title and artist are required"


@api_view(['POST'])
def rate_song(request):
    """
    Rate a song

    POST /api/rate-song
    {
        "title": "Irreplaceable",
        "artist": "Beyoncé",
        "rating": 1
    }
    """
    serializer = RateSongSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {"error": "Title, artist, and valid rating (1 or -1) are required"},
            status=status.HTTP_400_BAD_REQUEST
        )

    data = serializer.validated_data
    try:
        ratings.submit_rating(
            data['title'], data['artist'], user_fingerprint(request), data['rating']
        )
    except DatabaseError as e:
        return storage_error(e)

    return Response({"success": True, "rating": data['rating']})


@api_view(['GET'])
def song_ratings(request):
    """
    Thumbs up / down totals for a song

    GET /api/song-ratings?title=...&artist=...
    """
    serializer = SongQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        return Response({"error": SONG_REQUIRED}, status=status.HTTP_400_BAD_REQUEST)

    try:
        counts = ratings.rating_counts(
            serializer.validated_data['title'], serializer.validated_data['artist']
        )
    except DatabaseError as e:
        return storage_error(e)

    return Response(counts)


@api_view(['GET'])
def user_rating(request):
    """
    The calling listener's own rating for a song, null when not rated

    GET /api/user-rating?title=...&artist=...
    """
    serializer = SongQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        return Response({"error": SONG_REQUIRED}, status=status.HTTP_400_BAD_REQUEST)

    try:
        rating = ratings.user_rating(
            serializer.validated_data['title'],
            serializer.validated_data['artist'],
            user_fingerprint(request),
        )
    except DatabaseError as e:
        return storage_error(e)

    return Response({"rating": rating})
