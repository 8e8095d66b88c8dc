import apps.lanes.models.lane
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Lane',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('impact_score', models.FloatField(help_text='Ranking value for admin review, higher first')),
                ('state', models.CharField(choices=[('ok', 'OK'), ('watchlist', 'Watchlist'), ('save', 'Save'), ('archive', 'Archive')], default='ok', max_length=20)),
                ('metrics', models.JSONField(default=apps.lanes.models.lane.default_lane_metrics, help_text='Lane metrics: users, engagement, retention')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'lanes',
                'indexes': [models.Index(fields=['impact_score'], name='lanes_impact_idx')],
            },
        ),
    ]
