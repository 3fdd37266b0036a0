import decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Item',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
            ],
        ),
        migrations.CreateModel(
            name='Auction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('starts_at', models.DateTimeField(blank=True)),
                ('ends_at', models.DateTimeField(blank=True)),
                ('item', models.ForeignKey(blank=True, on_delete=django.db.models.deletion.PROTECT,
                                           related_name='auctions', to='auctionhouse.item')),
                ('lister', models.ForeignKey(blank=True, on_delete=django.db.models.deletion.CASCADE,
                                             related_name='listed_auctions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['starts_at', 'pk'],
            },
        ),
        migrations.CreateModel(
            name='Bid',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12,
                                               validators=[django.core.validators.MinValueValidator(decimal.Decimal('0.01'))])),
                ('placed_at', models.DateTimeField(auto_now_add=True)),
                ('auction', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE,
                                              related_name='bids', to='auctionhouse.auction')),
                ('bidder', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE,
                                             related_name='bids', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-amount', 'placed_at'],
            },
        ),
    ]
