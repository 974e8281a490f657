# apps/comunicacao/urls.py

from django.urls import path
from . import views

app_name = 'comunicacao'

urlpatterns = [
    # === COMUNICADOS ===
    path('comunicados/', views.ComunicadoView.as_view(), name='comunicados'),
    path('comunicados/<int:pk>/', views.ComunicadoView.as_view(), name='comunicado'),

    # === NOTIFICAÇÕES ===
    path('notificacoes/', views.notificacoes_view, name='notificacoes'),
    path('notificacoes/nao-lidas/', views.notificacoes_nao_lidas_view, name='nao_lidas'),
    path('notificacoes/lidas/', views.marcar_todas_lidas_view, name='marcar_todas'),
    path('notificacoes/<int:notificacao_id>/lida/', views.marcar_lida_view, name='marcar_lida'),
]
