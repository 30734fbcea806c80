from django.urls import path
from radio.api.views import (
    CurrentTrackAPIView,
    RecentTracksAPIView,
    TrackCreateAPIView,
)
from radio.api.ratings import (
    rate_song,
    song_ratings,
    user_rating,
)
from radio.views import album_art

app_name = 'radio_api'

urlpatterns = [
    # Now playing
    path('current-track',
         CurrentTrackAPIView.as_view(),
         name='current-track'),

    path('recent-tracks',
         RecentTracksAPIView.as_view(),
         name='recent-tracks'),

    path('track',
         TrackCreateAPIView.as_view(),
         name='track-create'),

    # Ratings
    path('rate-song',
         rate_song,
         name='rate-song'),

    path('song-ratings',
         song_ratings,
         name='song-ratings'),

    path('user-rating',
         user_rating,
         name='user-rating'),

    # Album art for the current track
    path('album-art',
         album_art,
         name='album-art'),
]
