#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Verifica conexão com o banco
3. Executa migrations (inclui as categorias padrão)
4. Cria dados de exemplo (opcional): agentes, clientes e tickets

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --sqlite --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django(force_sqlite: bool = False):
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    if force_sqlite:
        # Sem DATABASE_URL/DATABASE_HOST os settings caem no SQLite local
        os.environ.pop('DATABASE_URL', None)
        os.environ.pop('DATABASE_HOST', None)

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


SAMPLE_AGENTS = [
    {'full_name': 'Alice Johnson', 'email': 'alice@support.com', 'department': 'Support'},
    {'full_name': 'Bob Smith', 'email': 'bob@support.com', 'department': 'Support'},
    {'full_name': 'Carol White', 'email': 'carol@support.com', 'department': 'Support', 'role': 'Supervisor'},
]

SAMPLE_CUSTOMERS = [
    {'full_name': 'John Doe', 'email': 'john.doe@example.com', 'phone': '555-0101'},
    {'full_name': 'Jane Roe', 'email': 'jane.roe@example.com', 'phone': '555-0102'},
    {'full_name': 'Raj Kumar', 'email': 'raj.kumar@example.com', 'address': '12 MG Road, Bangalore'},
]

# (cliente, categoria, assunto, descrição, prioridade, agente, status final)
SAMPLE_TICKETS = [
    (0, 1, 'Internet caindo toda hora', 'A conexão cai a cada 10 minutos desde ontem.', 'High', 0, 'InProgress'),
    (0, 2, 'Cobrança em dobro', 'A fatura de março veio com o plano cobrado duas vezes.', 'Medium', 1, 'Resolved'),
    (1, 5, 'Mudança de plano', 'Quero migrar para o plano empresarial.', 'Low', None, None),
    (1, 4, 'Atendimento demorado', 'Esperei 40 minutos no telefone sem resposta.', 'Critical', 2, 'OnHold'),
    (2, 3, 'Horário de funcionamento', 'Qual o horário da loja no feriado?', 'Low', 1, 'Closed'),
]


def create_sample_data():
    """Cria dados de exemplo através dos use cases (mesmas regras da API)."""
    from src.config.container import get_container
    from src.core.agents.dtos import CreateAgentInputDTO
    from src.core.customers.dtos import CreateCustomerInputDTO
    from src.core.tickets.dtos import (
        AssignTicketInputDTO,
        CreateTicketInputDTO,
        UpdateTicketStatusInputDTO,
    )
    from src.core.shared.exceptions import ConflictError

    container = get_container()

    print("👥 Criando agentes e clientes de exemplo...")
    agents = []
    for data in SAMPLE_AGENTS:
        try:
            agents.append(container.create_agent_service().execute(CreateAgentInputDTO(**data)))
            print(f"   ✓ Agente {data['full_name']}")
        except ConflictError:
            agents.append(None)
            print(f"   - Agente {data['email']} já existe")

    customers = []
    for data in SAMPLE_CUSTOMERS:
        try:
            customers.append(container.create_customer_service().execute(CreateCustomerInputDTO(**data)))
            print(f"   ✓ Cliente {data['full_name']}")
        except ConflictError:
            customers.append(container.get_customer_by_email_service().execute(data['email']))
            print(f"   - Cliente {data['email']} já existe")

    print("📝 Criando tickets de exemplo...")
    created = 0
    for customer_idx, category_id, subject, description, priority, agent_idx, status in SAMPLE_TICKETS:
        try:
            ticket = container.create_ticket_service().execute(CreateTicketInputDTO(
                customer_id=customers[customer_idx].id,
                category_id=category_id,
                subject=subject,
                description=description,
                priority=priority,
            ))
        except ConflictError:
            print(f"   - {subject[:50]} (duplicado, ignorado)")
            continue

        agent = agents[agent_idx] if agent_idx is not None else None
        if agent is not None:
            container.assign_ticket_service().execute(AssignTicketInputDTO(ticket.id, agent.id))
        if status and status != 'InProgress':
            container.update_ticket_status_service().execute(
                UpdateTicketStatusInputDTO(ticket.id, status, notes="Dados de exemplo")
            )
        created += 1
        print(f"   ✓ {subject[:50]}")

    print(f"✅ {created} tickets criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import DatabaseError, connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except DatabaseError as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  SLA (horas): {settings.SLA_BREACH_HOURS}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=src.config.settings --pythonpath .")
    print("   2. Acesse: http://localhost:8000/api/tickets/dashboard/")
    print("   3. Acesse: http://localhost:8000/api/tickets/sla-report/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )
    parser.add_argument(
        '--sqlite',
        action='store_true',
        help='Ignorar DATABASE_URL/DATABASE_HOST e usar SQLite local'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Support Desk - Quick Setup")
    print("=" * 60 + "\n")

    # Configurar Django
    setup_django(force_sqlite=args.sqlite)

    if args.check_only:
        check_connection()
        return

    # Verificar conexão
    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, rode com --sqlite")
        return

    # Executar migrations
    run_migrations()

    # Criar dados de exemplo
    if args.with_sample_data:
        create_sample_data()

    # Mostrar informações
    show_info()


if __name__ == '__main__':
    main()
