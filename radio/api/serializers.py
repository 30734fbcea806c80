from rest_framework import serializers
from radio.models import Track, Account, Rating


class TrackSerializer(serializers.ModelSerializer):
    class Meta:
        model = Track
        fields = ['id', 'title', 'artist', 'played_at']


class TrackCreateSerializer(serializers.Serializer):
    # Titles are used verbatim as rating keys, so no whitespace trimming
    title = serializers.CharField(trim_whitespace=False)
    artist = serializers.CharField(trim_whitespace=False)


class SongQuerySerializer(TrackCreateSerializer):
    """?title=...&artist=... on the rating lookups."""


class ThumbField(serializers.Field):
    """
    Accepts exactly 1 or -1 as a JSON number.

    Strings and booleans are rejected even where Python would compare them
    equal to 1.
    """

    default_error_messages = {
        'invalid': 'Rating must be 1 or -1.',
    }

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail('invalid')
        if data not in Rating.VALUES:
            self.fail('invalid')
        return int(data)

    def to_representation(self, value):
        return value


class RateSongSerializer(TrackCreateSerializer):
    rating = ThumbField()


class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ['id', 'name', 'email', 'created_at']


class AccountCreateSerializer(serializers.Serializer):
    name = serializers.CharField(trim_whitespace=False)
    email = serializers.CharField(trim_whitespace=False)
