"""
URL patterns da API de Clientes (prefixo /api/customers/).
"""

from django.urls import path

from . import api_views

app_name = 'customers'

urlpatterns = [
    path('', api_views.CustomerAPIListView.as_view(), name='list'),
    path('stats/', api_views.CustomerAPIStatsView.as_view(), name='stats'),
    path('by-email/', api_views.CustomerAPIByEmailView.as_view(), name='by_email'),
    path('<int:pk>/', api_views.CustomerAPIDetailView.as_view(), name='detail'),
    path('<int:pk>/tickets/', api_views.CustomerAPITicketsView.as_view(), name='tickets'),
]
