from django.db import models


def default_lane_metrics():
    return {'users': 0, 'engagement': 0, 'retention': 0}


class Lane(models.Model):
    """Tracked business segment reviewed from the admin lane console"""
    STATE_OK = 'ok'
    STATE_WATCHLIST = 'watchlist'
    STATE_SAVE = 'save'
    STATE_ARCHIVE = 'archive'

    STATE_CHOICES = [
        (STATE_OK, 'OK'),
        (STATE_WATCHLIST, 'Watchlist'),
        (STATE_SAVE, 'Save'),
        (STATE_ARCHIVE, 'Archive'),
    ]

    name = models.CharField(max_length=200)
    description = models.TextField()
    impact_score = models.FloatField(help_text="Ranking value for admin review, higher first")
    state = models.CharField(max_length=20, choices=STATE_CHOICES, default=STATE_OK)
    metrics = models.JSONField(
        default=default_lane_metrics,
        help_text="Lane metrics: users, engagement, retention"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lanes'
        indexes = [
            models.Index(fields=['impact_score'], name='lanes_impact_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.state})"

    @classmethod
    def valid_states(cls):
        return [value for value, _ in cls.STATE_CHOICES]
