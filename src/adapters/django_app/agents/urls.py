"""
URL patterns da API de Agentes (prefixo /api/agents/).
"""

from django.urls import path

from . import api_views

app_name = 'agents'

urlpatterns = [
    path('', api_views.AgentAPIListView.as_view(), name='list'),
    path('stats/', api_views.AgentAPIStatsView.as_view(), name='stats'),
    path('<int:pk>/', api_views.AgentAPIDetailView.as_view(), name='detail'),
    path('<int:pk>/tickets/', api_views.AgentAPITicketsView.as_view(), name='tickets'),
]
