import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.TextField()),
                ('email', models.TextField(unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'users',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Track',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.TextField()),
                ('artist', models.TextField()),
                ('played_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'tracks',
                'indexes': [models.Index(fields=['played_at'], name='ix_tracks_played_at')],
            },
        ),
        migrations.CreateModel(
            name='Rating',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('track_title', models.TextField()),
                ('track_artist', models.TextField()),
                ('user_fingerprint', models.CharField(max_length=16)),
                ('rating', models.SmallIntegerField(choices=[(1, 'Thumbs up'), (-1, 'Thumbs down')])),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'ratings',
                'constraints': [
                    models.UniqueConstraint(fields=('track_title', 'track_artist', 'user_fingerprint'), name='uq_ratings_song_listener'),
                    models.CheckConstraint(condition=models.Q(('rating__in', [1, -1])), name='ck_ratings_thumbs'),
                ],
            },
        ),
    ]
