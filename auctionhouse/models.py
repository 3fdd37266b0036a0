import logging
from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from auctionhouse import lifecycle
from auctionhouse.validators import auction_errors, error_codes

logger = logging.getLogger(__name__)


class Item(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    def __str__(self):
        return self.title


class AuctionQuerySet(models.QuerySet):
    # each filter mirrors lifecycle.classify(), so for a fixed now every
    # auction lands in exactly one of them

    def completed(self, now=None):
        if now is None:
            now = timezone.now()
        return self.filter(ends_at__lte=now)

    def live(self, now=None):
        if now is None:
            now = timezone.now()
        return self.filter(starts_at__lte=now, ends_at__gt=now)

    def scheduled(self, now=None):
        if now is None:
            now = timezone.now()
        return self.filter(starts_at__gt=now)


class Auction(models.Model):
    # blank=True keeps clean_fields() quiet so that clean() reports missing
    # values with its own codes; the columns are still NOT NULL
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name='auctions', blank=True)
    lister = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE,
                               related_name='listed_auctions', blank=True)
    starts_at = models.DateTimeField(blank=True)
    ends_at = models.DateTimeField(blank=True)

    objects = AuctionQuerySet.as_manager()

    class Meta:
        ordering = ['starts_at', 'pk']

    def __str__(self):
        if self.item_id is None:
            return 'auction #{}'.format(self.pk)
        return '{} ({} - {})'.format(self.item.title, self.starts_at, self.ends_at)

    def clean(self):
        errors = auction_errors(self)
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        try:
            self.full_clean()
        except ValidationError as e:
            logger.info('rejected auction %s: %s', self.pk, ', '.join(error_codes(e)))
            raise
        super().save(*args, **kwargs)

    def validation_failures(self):
        try:
            self.full_clean()
        except ValidationError as e:
            return error_codes(e)
        return []

    def is_valid(self):
        return not self.validation_failures()

    @property
    def state(self):
        return lifecycle.classify(self, timezone.now())

    @property
    def is_completed(self):
        return self.state == lifecycle.COMPLETED

    @property
    def is_live(self):
        return self.state == lifecycle.LIVE

    @property
    def is_scheduled(self):
        return self.state == lifecycle.SCHEDULED

    @property
    def bidders(self):
        # an unsaved auction cannot have bids yet
        if self.pk is None:
            return get_user_model().objects.none()
        return get_user_model().objects.filter(bids__auction=self).distinct()

    @property
    def highest_bid(self):
        if self.pk is None:
            return None
        return self.bids.order_by(*lifecycle.bid_ordering()).first()

    @property
    def highest_bidder(self):
        bid = self.highest_bid
        if bid is None:
            return None
        return bid.bidder


class Bid(models.Model):
    amount = models.DecimalField(max_digits=12, decimal_places=2,
                                 validators=[MinValueValidator(Decimal('0.01'))])
    bidder = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bids')
    auction = models.ForeignKey(Auction, on_delete=models.CASCADE, related_name='bids')
    placed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        # order the bids according to amount in descending order
        ordering = ['-amount', 'placed_at']

    def __str__(self):
        return 'amount: {} bidder: {} in auction #{}'.format(self.amount, self.bidder.username, self.auction_id)

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)
