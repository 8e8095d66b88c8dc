from django.urls import path
from apps.products.views import CatalogView
from . import views

app_name = 'merch'

urlpatterns = [
    path('catalog', CatalogView.as_view(), name='catalog'),
    path('quote', views.merch_quote, name='quote'),
    path('redeem', views.redeem_merch, name='redeem'),
]
