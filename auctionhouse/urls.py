from django.urls import path

from auctionhouse import views

urlpatterns = [
    path('', views.browse, name='browse'),
    path('auction/create/', views.CreateAuction.as_view(), name='create_auction'),
    path('auction/<int:id>/', views.browse_auction, name='browse_auction'),
]
