# apps/comunicacao/routing.py

from django.urls import re_path
from . import consumers

# Rotas WebSocket da aplicação comunicação
websocket_urlpatterns = [
    # Notificações pessoais do usuário
    re_path(r'ws/notificacoes/$', consumers.NotificacaoConsumer.as_asgi()),
]
