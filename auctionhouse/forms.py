from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from auctionhouse.validators import validate_auction_time_window

DATETIME_INPUT_FORMATS = ['%d.%m.%Y %H:%M']


class CreateAuctionForm(forms.Form):
    title = forms.CharField(required=True, max_length=200, label=_("Item title"))
    description = forms.CharField(required=False, widget=forms.Textarea, label=_("Item description"))
    starts_at = forms.DateTimeField(required=True, input_formats=DATETIME_INPUT_FORMATS,
                                    help_text=_("Enter date in form dd.mm.yyyy hh:mm"))
    ends_at = forms.DateTimeField(required=True, input_formats=DATETIME_INPUT_FORMATS,
                                  help_text=_("Enter date in form dd.mm.yyyy hh:mm"))

    def clean(self):
        cleaned_data = super().clean()
        starts_at = cleaned_data.get('starts_at')
        ends_at = cleaned_data.get('ends_at')

        # only compare once both dates parsed, the field errors cover the rest
        if starts_at is not None and ends_at is not None:
            try:
                validate_auction_time_window(starts_at, ends_at)
            except ValidationError as e:
                self.add_error('ends_at', e)
        return cleaned_data

    def add_model_errors(self, validation_error):
        # item errors belong to the title field, anything else unknown goes on top
        for field, errors in validation_error.error_dict.items():
            if field == 'item':
                field = 'title'
            if field not in self.fields:
                field = None
            for error in errors:
                self.add_error(field, error)
