# apps/core/__init__.py

"""
Core - Aplicação base do Condo Gestão

Contém:
- Condomínio (tenant), usuário customizado e vínculos
- Autenticação JWT e middleware de condomínio ativo
- Permissões por papel e por módulo
- View genérica de CRUD escopada por condomínio
"""
