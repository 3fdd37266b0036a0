from datetime import datetime

from django.core.exceptions import ValidationError
from django.core.validators import EMPTY_VALUES
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

MISSING_ITEM = 'missing_item'
MISSING_LISTER = 'missing_lister'
MISSING_START_TIME = 'missing_start_time'
MISSING_END_TIME = 'missing_end_time'
INVALID_TIME_WINDOW = 'invalid_time_window'


def validate_auction_time_window(starts_at, ends_at):
    # naive values get the current timezone, the same as they would on save
    if timezone.is_naive(starts_at):
        starts_at = timezone.make_aware(starts_at)
    if timezone.is_naive(ends_at):
        ends_at = timezone.make_aware(ends_at)

    # an auction has to end strictly after it starts
    if ends_at <= starts_at:
        raise ValidationError(
            _('The auction must end after it starts'),
            code=INVALID_TIME_WINDOW,
        )


def auction_errors(auction):
    """Collect every problem with an auction, keyed by field name.

    Returns an empty dict for a valid auction. All checks run, so an auction
    missing both its item and its lister reports both. Timestamps that are not
    datetimes were already rejected by clean_fields() and are not compared.
    """
    errors = {}

    if auction.item_id in EMPTY_VALUES:
        errors['item'] = ValidationError(_('An auction must list an item'), code=MISSING_ITEM)

    if auction.lister_id in EMPTY_VALUES:
        errors['lister'] = ValidationError(_('An auction must have a lister'), code=MISSING_LISTER)

    if auction.starts_at in EMPTY_VALUES:
        errors['starts_at'] = ValidationError(
            _('An auction must have a start date and time'), code=MISSING_START_TIME)

    if auction.ends_at in EMPTY_VALUES:
        errors['ends_at'] = ValidationError(
            _('An auction must have an end date and time'), code=MISSING_END_TIME)

    if isinstance(auction.starts_at, datetime) and isinstance(auction.ends_at, datetime):
        try:
            validate_auction_time_window(auction.starts_at, auction.ends_at)
        except ValidationError as e:
            errors['ends_at'] = e

    return errors


def error_codes(validation_error):
    if not hasattr(validation_error, 'error_dict'):
        return [error.code for error in validation_error.error_list]

    codes = []
    for field_errors in validation_error.error_dict.values():
        for error in field_errors:
            codes.append(error.code)
    return codes
