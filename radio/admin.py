from django.contrib import admin

from .models import Account, Rating, Track


@admin.register(Track)
class TrackAdmin(admin.ModelAdmin):
    list_display = ("title", "artist", "played_at")
    search_fields = ("title", "artist")
    ordering = ("-played_at", "-id")


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ("track_title", "track_artist", "rating", "user_fingerprint", "created_at")
    list_filter = ("rating",)
    search_fields = ("track_title", "track_artist", "user_fingerprint")


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "created_at")
    search_fields = ("name", "email")
