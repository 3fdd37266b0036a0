from django.apps import AppConfig


class AuctionhouseConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'auctionhouse'
