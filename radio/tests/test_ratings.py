from unittest import mock

from django.db import DatabaseError, IntegrityError, transaction
from django.test import TestCase
from rest_framework.test import APIClient

from radio.models import Rating
from radio.services import ratings
from radio.services.fingerprint import fingerprint
from radio.tests.factories import RatingFactory

FIREFOX = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
SAFARI = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 Safari/605.1.15"

TITLE = "Ain't 2 Proud 2 Beg"
ARTIST = "TLC"


class TestRatingService(TestCase):
    """Upsert and aggregation on the ratings table."""

    def test_rerating_replaces_previous_rating(self):
        fp = fingerprint("203.0.113.7", FIREFOX)
        ratings.submit_rating(TITLE, ARTIST, fp, 1)
        ratings.submit_rating(TITLE, ARTIST, fp, -1)

        rows = Rating.objects.filter(track_title=TITLE, track_artist=ARTIST, user_fingerprint=fp)
        self.assertEqual(rows.count(), 1)
        self.assertEqual(rows.get().rating, -1)

    def test_same_rating_twice_keeps_one_row(self):
        fp = fingerprint("203.0.113.7", FIREFOX)
        first = ratings.submit_rating(TITLE, ARTIST, fp, 1)
        second = ratings.submit_rating(TITLE, ARTIST, fp, 1)

        self.assertEqual(first.id, second.id)
        self.assertEqual(Rating.objects.count(), 1)

    def test_invalid_value_rejected(self):
        with self.assertRaises(ValueError):
            ratings.submit_rating(TITLE, ARTIST, "0123456789abcdef", 2)
        self.assertEqual(Rating.objects.count(), 0)

    def test_counts_default_to_zero(self):
        self.assertEqual(
            ratings.rating_counts(TITLE, ARTIST),
            {"thumbs_up": 0, "thumbs_down": 0},
        )

    def test_counts_match_distinct_listeners(self):
        listeners = [fingerprint(f"198.51.100.{i}", FIREFOX) for i in range(6)]
        for i, fp in enumerate(listeners):
            ratings.submit_rating(TITLE, ARTIST, fp, 1 if i % 2 else -1)
        # a few listeners change their minds
        ratings.submit_rating(TITLE, ARTIST, listeners[0], 1)
        ratings.submit_rating(TITLE, ARTIST, listeners[1], -1)
        ratings.submit_rating(TITLE, ARTIST, listeners[1], 1)

        counts = ratings.rating_counts(TITLE, ARTIST)
        self.assertEqual(counts["thumbs_up"] + counts["thumbs_down"], len(listeners))
        self.assertEqual(counts, {"thumbs_up": 4, "thumbs_down": 2})

    def test_counts_are_per_song(self):
        RatingFactory(track_title=TITLE, track_artist=ARTIST, rating=1)
        RatingFactory(track_title=TITLE, track_artist="Somebody Else", rating=-1)
        RatingFactory(track_title="Another Song", track_artist=ARTIST, rating=-1)

        self.assertEqual(
            ratings.rating_counts(TITLE, ARTIST),
            {"thumbs_up": 1, "thumbs_down": 0},
        )

    def test_user_rating(self):
        fp = fingerprint("203.0.113.7", FIREFOX)
        self.assertIsNone(ratings.user_rating(TITLE, ARTIST, fp))

        RatingFactory(track_title=TITLE, track_artist=ARTIST, user_fingerprint=fp, rating=-1)
        self.assertEqual(ratings.user_rating(TITLE, ARTIST, fp), -1)
        self.assertIsNone(ratings.user_rating(TITLE, ARTIST, fingerprint("203.0.113.7", SAFARI)))

    def test_database_rejects_out_of_range_rating(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Rating.objects.create(
                    track_title=TITLE, track_artist=ARTIST,
                    user_fingerprint="0123456789abcdef", rating=2,
                )

    def test_database_rejects_duplicate_key(self):
        RatingFactory(track_title=TITLE, track_artist=ARTIST, user_fingerprint="0123456789abcdef")
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                RatingFactory(
                    track_title=TITLE, track_artist=ARTIST,
                    user_fingerprint="0123456789abcdef", rating=-1,
                )


class TestRatingAPI(TestCase):
    """POST /api/rate-song, GET /api/song-ratings, GET /api/user-rating"""

    def setUp(self):
        self.client = APIClient(REMOTE_ADDR="203.0.113.7", HTTP_USER_AGENT=FIREFOX)

    def rate(self, rating, **extra):
        return self.client.post(
            "/api/rate-song",
            {"title": TITLE, "artist": ARTIST, "rating": rating},
            format="json",
            **extra,
        )

    def test_rate_song(self):
        response = self.rate(1)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "rating": 1})
        stored = Rating.objects.get()
        self.assertEqual(stored.user_fingerprint, fingerprint("203.0.113.7", FIREFOX))
        self.assertEqual(stored.rating, 1)

    def test_thumbs_up_then_down_leaves_one_row(self):
        self.rate(1)
        response = self.rate(-1)

        self.assertEqual(response.json()["rating"], -1)
        self.assertEqual(Rating.objects.count(), 1)
        self.assertEqual(Rating.objects.get().rating, -1)

    def test_invalid_rating_values(self):
        for bad in (2, 0, "1", True, None, 1.5):
            with self.subTest(rating=bad):
                response = self.rate(bad)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(
                    response.json(),
                    {"error": "Title, artist, and valid rating (1 or -1) are required"},
                )
        self.assertEqual(Rating.objects.count(), 0)

    def test_missing_fields(self):
        for payload in ({"artist": ARTIST, "rating": 1},
                        {"title": TITLE, "rating": 1},
                        {"title": "", "artist": ARTIST, "rating": 1},
                        {"title": TITLE, "artist": ARTIST}):
            with self.subTest(payload=payload):
                response = self.client.post("/api/rate-song", payload, format="json")
                self.assertEqual(response.status_code, 400)
        self.assertEqual(Rating.objects.count(), 0)

    def test_float_rating_accepted(self):
        response = self.rate(-1.0)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["rating"], -1)

    def test_different_browsers_rate_separately(self):
        self.rate(1)
        self.rate(-1, HTTP_USER_AGENT=SAFARI)

        response = self.client.get("/api/song-ratings", {"title": TITLE, "artist": ARTIST})
        self.assertEqual(response.json(), {"thumbs_up": 1, "thumbs_down": 1})

    def test_song_ratings_empty(self):
        response = self.client.get("/api/song-ratings", {"title": TITLE, "artist": ARTIST})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"thumbs_up": 0, "thumbs_down": 0})

    def test_song_ratings_requires_title_and_artist(self):
        response = self.client.get("/api/song-ratings", {"title": TITLE})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Title and artist are required"})

    def test_user_rating(self):
        response = self.client.get("/api/user-rating", {"title": TITLE, "artist": ARTIST})
        self.assertEqual(response.json(), {"rating": None})

        self.rate(-1)
        response = self.client.get("/api/user-rating", {"title": TITLE, "artist": ARTIST})
        self.assertEqual(response.json(), {"rating": -1})

        # another browser on the same address has not rated
        response = self.client.get(
            "/api/user-rating", {"title": TITLE, "artist": ARTIST}, HTTP_USER_AGENT=SAFARI
        )
        self.assertEqual(response.json(), {"rating": None})

    def test_user_rating_requires_title_and_artist(self):
        response = self.client.get("/api/user-rating", {"artist": ARTIST})
        self.assertEqual(response.status_code, 400)

    def test_storage_error_on_rate(self):
        with mock.patch(
            "radio.services.ratings.submit_rating",
            side_effect=DatabaseError("database is locked"),
        ):
            response = self.rate(1)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "database is locked"})

    def test_storage_error_on_counts(self):
        with mock.patch(
            "radio.services.ratings.rating_counts",
            side_effect=DatabaseError("no such table: ratings"),
        ):
            response = self.client.get("/api/song-ratings", {"title": TITLE, "artist": ARTIST})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "no such table: ratings"})

    def test_storage_error_on_user_rating(self):
        with mock.patch(
            "radio.services.ratings.user_rating",
            side_effect=DatabaseError("disk I/O error"),
        ):
            response = self.client.get("/api/user-rating", {"title": TITLE, "artist": ARTIST})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "disk I/O error"})

    def test_form_encoded_body_is_bad_request(self):
        response = self.client.post(
            "/api/rate-song", {"title": TITLE, "artist": ARTIST, "rating": 1}
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())
        self.assertEqual(Rating.objects.count(), 0)

    def test_malformed_json_is_bad_request(self):
        response = self.client.post(
            "/api/rate-song", '{"title": ', content_type="application/json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

    def test_wrong_method_uses_error_body(self):
        response = self.client.get("/api/rate-song")

        self.assertEqual(response.status_code, 405)
        self.assertIn("error", response.json())
