"""
Configuração do projeto Formações Manager.

Módulos:
- settings: Variáveis de ambiente e configuração de logging
- container: Dependency Injection Container
"""
