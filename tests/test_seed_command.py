"""
Tests for the seed_demo_data management command.
"""
from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.lanes.models import Lane
from apps.metrics.models import DailyMetrics
from apps.products.models import Product
from apps.users.models import User


class SeedDemoDataTest(TestCase):

    def _seed(self, *args):
        out = StringIO()
        call_command('seed_demo_data', *args, stdout=out)
        return out.getvalue()

    def test_seeds_every_table(self):
        output = self._seed()

        self.assertIn('Demo data seeded successfully', output)
        self.assertEqual(User.objects.get(email='admin@example.com').credits, 5000)
        self.assertTrue(User.objects.get(email='admin@example.com').is_admin)
        self.assertEqual(User.objects.get(email='maya@example.com').credits, 1250)
        self.assertEqual(
            sorted(str(p.price) for p in Product.objects.all()),
            ['19.99', '24.99', '49.99']
        )
        self.assertEqual(Lane.objects.count(), 20)
        self.assertEqual(DailyMetrics.objects.count(), 30)

    def test_lane_values_in_range(self):
        self._seed()

        for lane in Lane.objects.all():
            self.assertIn(lane.state, Lane.valid_states())
            self.assertTrue(0 <= lane.impact_score < 100)
            self.assertTrue(100 <= lane.metrics['users'] < 1100)

    def test_flush_replaces_existing_data(self):
        self._seed()
        self._seed('--flush')

        self.assertEqual(Lane.objects.count(), 20)
        self.assertEqual(Product.objects.count(), 3)
        self.assertEqual(User.objects.count(), 2)

    def test_rerun_without_flush_keeps_one_record_per_day(self):
        self._seed()
        self._seed('--lanes', '0')

        self.assertEqual(DailyMetrics.objects.count(), 30)
        self.assertEqual(Product.objects.count(), 3)
