"""
URL patterns da API de Tickets (prefixo /api/tickets/).

Rotas fixas vêm antes de <int:pk>/ para não conflitar.
"""

from django.urls import path

from . import api_views

app_name = 'tickets'

urlpatterns = [
    # Listagem e criação
    path('', api_views.TicketAPIListView.as_view(), name='list'),

    # Consultas
    path('open/', api_views.TicketAPIQueryView.as_view(
        service_name='list_open_tickets_service'), name='open'),
    path('resolved/', api_views.TicketAPIQueryView.as_view(
        service_name='list_resolved_tickets_service'), name='resolved'),
    path('status/<str:status>/', api_views.TicketAPIQueryView.as_view(
        service_name='list_tickets_by_status_service'), name='by_status'),
    path('priority/<str:priority>/', api_views.TicketAPIQueryView.as_view(
        service_name='list_tickets_by_priority_service'), name='by_priority'),
    path('customer/<int:customer_id>/', api_views.TicketAPIQueryView.as_view(
        service_name='list_tickets_by_customer_service'), name='by_customer'),
    path('agent/<int:agent_id>/', api_views.TicketAPIQueryView.as_view(
        service_name='list_tickets_by_agent_service'), name='by_agent'),
    path('daterange/', api_views.TicketAPIDateRangeView.as_view(), name='date_range'),
    path('search/', api_views.TicketAPISearchView.as_view(), name='search'),

    # Relatórios
    path('summary/', api_views.TicketAPISummaryView.as_view(), name='summary'),
    path('sla-report/', api_views.TicketAPISLAReportView.as_view(), name='sla_report'),
    path('stats/resolution/', api_views.TicketAPIResolutionStatsView.as_view(),
         name='stats_resolution'),
    path('stats/categories/', api_views.TicketAPIDistributionView.as_view(
        service_name='category_distribution_service'), name='stats_categories'),
    path('stats/priorities/', api_views.TicketAPIDistributionView.as_view(
        service_name='priority_distribution_service'), name='stats_priorities'),
    path('stats/agents/', api_views.TicketAPIAgentPerformanceView.as_view(),
         name='stats_agents'),
    path('dashboard/', api_views.TicketAPIDashboardView.as_view(), name='dashboard'),

    # Ticket específico
    path('<int:pk>/', api_views.TicketAPIDetailView.as_view(), name='detail'),
    path('<int:pk>/status/', api_views.TicketAPIStatusView.as_view(), name='status'),
    path('<int:pk>/assign/', api_views.TicketAPIAssignView.as_view(), name='assign'),
]
