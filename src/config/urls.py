"""
URL Configuration para o Support Desk.

Estrutura:
- /api/tickets/ - Ciclo de vida, consultas e relatórios de tickets
- /api/customers/ - Clientes
- /api/agents/ - Agentes
- /api/categories/ - Categorias de referência
- /health/ - Health check
"""

from django.urls import path, include

from src.adapters.django_app.shared.api import HealthView
from src.adapters.django_app.tickets.api_views import CategoryAPIListView

urlpatterns = [
    path('api/tickets/', include('src.adapters.django_app.tickets.urls')),
    path('api/customers/', include('src.adapters.django_app.customers.urls')),
    path('api/agents/', include('src.adapters.django_app.agents.urls')),
    path('api/categories/', CategoryAPIListView.as_view(), name='categories'),

    # Health check
    path('health/', HealthView.as_view(), name='health'),
]
