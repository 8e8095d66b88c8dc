import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('credits_applied', models.PositiveIntegerField(default=0)),
                ('credit_value', models.DecimalField(decimal_places=4, help_text='Dollar value covered by credits', max_digits=12)),
                ('cash_payment', models.DecimalField(decimal_places=4, help_text='Server-computed cash due', max_digits=12)),
                ('subtotal', models.DecimalField(decimal_places=4, help_text='Product price at settlement time', max_digits=12)),
                ('shipping', models.DecimalField(decimal_places=4, help_text='Flat shipping fee', max_digits=12)),
                ('tax', models.DecimalField(decimal_places=4, help_text='Tax on the subtotal', max_digits=12)),
                ('total', models.DecimalField(decimal_places=4, help_text='Subtotal + shipping + tax, before credits', max_digits=12)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('idempotency_key', models.CharField(blank=True, help_text='Client key making a retried settlement return the original order', max_length=128, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='orders', to='products.product')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user'], name='orders_user_idx'),
                    models.Index(fields=['status'], name='orders_status_idx'),
                    models.Index(fields=['created_at'], name='orders_created_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'idempotency_key'), name='uniq_order_user_idempotency_key'),
                ],
            },
        ),
    ]
