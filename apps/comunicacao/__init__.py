# apps/comunicacao/__init__.py

"""
Comunicação - comunicados, notificações e WebSocket de notificações
"""
