"""
Management command to seed demo data for the merch store and admin console.
"""
import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.credits.models import CreditTransaction
from apps.lanes.models import Lane
from apps.metrics.models import DailyMetrics
from apps.metrics.services import MetricsService
from apps.orders.models import Order
from apps.products.models import Product
from apps.users.models import User


class Command(BaseCommand):
    help = 'Seed demo users, products, lanes and 30 days of metrics'

    def add_arguments(self, parser):
        parser.add_argument(
            '--flush',
            action='store_true',
            help='Delete existing users, products, orders, lanes and metrics first',
        )
        parser.add_argument(
            '--days',
            type=int,
            default=30,
            help='Number of days of metrics to generate (default: 30)',
        )
        parser.add_argument(
            '--lanes',
            type=int,
            default=20,
            help='Number of lanes to generate (default: 20)',
        )

    def handle(self, *args, **options):
        self.stdout.write('Seeding demo data...')

        with transaction.atomic():
            if options['flush']:
                self.flush()

            self.create_users()
            self.create_products()
            self.create_lanes(options['lanes'])
            self.create_metrics(options['days'])

        self.stdout.write(self.style.SUCCESS('Demo data seeded successfully'))

    def flush(self):
        """Clear the seeded tables, dependents first"""
        Order.objects.all().delete()
        CreditTransaction.objects.all().delete()
        Product.objects.all().delete()
        Lane.objects.all().delete()
        DailyMetrics.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        self.stdout.write('Existing data cleared')

    def create_users(self):
        users_data = [
            {
                'username': 'admin',
                'name': 'Admin User',
                'email': 'admin@example.com',
                'credits': 5000,
                'is_admin': True,
            },
            {
                'username': 'maya',
                'name': 'Maya Johnson',
                'email': 'maya@example.com',
                'credits': 1250,
                'is_admin': False,
            },
        ]

        for user_data in users_data:
            user, created = User.objects.update_or_create(
                email=user_data['email'],
                defaults=user_data
            )
            if created:
                user.set_unusable_password()
                user.save(update_fields=['password'])
            action = 'Created' if created else 'Updated'
            self.stdout.write(f'{action} user: {user.email} ({user.credits} credits)')

    def create_products(self):
        products_data = [
            {
                'name': 'T-Shirt',
                'description': 'Premium cotton t-shirt with logo',
                'price': Decimal('24.99'),
                'image': 'https://example.com/images/t-shirt.png',
            },
            {
                'name': 'Hoodie',
                'description': 'Comfortable hoodie with branding',
                'price': Decimal('49.99'),
                'image': 'https://example.com/images/hoodie.png',
            },
            {
                'name': 'Water Bottle',
                'description': 'Stainless steel water bottle with logo',
                'price': Decimal('19.99'),
                'image': 'https://example.com/images/water-bottle.png',
            },
        ]

        for product_data in products_data:
            product, created = Product.objects.get_or_create(
                name=product_data['name'],
                defaults=product_data
            )
            if created:
                self.stdout.write(f'Created product: {product.name} ({product.price})')

    def create_lanes(self, count):
        states = Lane.valid_states()
        lanes = [
            Lane(
                name=f'Lane {i}',
                description=f'Description for Lane {i}',
                impact_score=random.randint(0, 99),
                state=random.choice(states),
                metrics={
                    'users': random.randint(100, 1099),
                    'engagement': random.randint(0, 99),
                    'retention': random.randint(0, 99),
                },
            )
            for i in range(1, count + 1)
        ]
        Lane.objects.bulk_create(lanes)
        self.stdout.write(f'Created {len(lanes)} lanes')

    def create_metrics(self, days):
        today = MetricsService.today()
        created_count = 0
        for offset in range(days):
            _, created = DailyMetrics.objects.get_or_create(
                date=today - timedelta(days=offset),
                defaults={
                    'bursts': random.randint(500, 1499),
                    'wins': random.randint(50, 249),
                    'purchases': random.randint(20, 119),
                    'redemptions': random.randint(10, 59),
                    'referrals': random.randint(5, 34),
                }
            )
            if created:
                created_count += 1
        self.stdout.write(f'Created {created_count} days of metrics')
