import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.db import transaction
from django.http import HttpResponseRedirect
from django.shortcuts import get_object_or_404, render
from django.urls import reverse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.utils.translation import gettext_lazy as _
from django.views import View

from auctionhouse import models
from auctionhouse.forms import CreateAuctionForm

logger = logging.getLogger(__name__)


def browse(request):
    now = timezone.now()
    auctions = models.Auction.objects.select_related('item', 'lister')

    return render(request, 'auctionhouse/browse.html', {'live_auctions': auctions.live(now),
                                                        'scheduled_auctions': auctions.scheduled(now),
                                                        'completed_auctions': auctions.completed(now)})


def browse_auction(request, id):
    auction = get_object_or_404(models.Auction.objects.select_related('item', 'lister'), pk=id)
    highest_bid = auction.highest_bid

    return render(request, 'auctionhouse/browse_auction.html', {'auction': auction,
                                                                'state': auction.state,
                                                                'highest_bid': highest_bid,
                                                                'highest_bidder': highest_bid.bidder if highest_bid else None,
                                                                'bidder_count': auction.bidders.count()})


@method_decorator(login_required, name='dispatch')
class CreateAuction(View):
    template_name = 'auctionhouse/create_auction.html'

    def get(self, request):
        form = CreateAuctionForm()
        return render(request, self.template_name, {'form': form})

    def post(self, request):
        form = CreateAuctionForm(request.POST)
        if not form.is_valid():
            # form was invalid, need to send it back for the user to fix
            return render(request, self.template_name, {'form': form})

        cleaned_data = form.cleaned_data
        try:
            with transaction.atomic():
                item = models.Item.objects.create(title=cleaned_data['title'],
                                                  description=cleaned_data['description'])
                auction = models.Auction(item=item, lister=request.user,
                                         starts_at=cleaned_data['starts_at'], ends_at=cleaned_data['ends_at'])
                auction.save()
        except ValidationError as e:
            form.add_model_errors(e)
            return render(request, self.template_name, {'form': form})

        logger.info('%s listed auction %s for %r', request.user.username, auction.pk, item.title)
        messages.add_message(request, messages.INFO, _("New Auction has been saved"))
        return HttpResponseRedirect(reverse('browse_auction', args=[auction.pk]))
