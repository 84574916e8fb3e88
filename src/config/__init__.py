"""
Configuração do projeto Support Desk.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- wsgi: WSGI application
- container: Dependency Injection Container
"""
