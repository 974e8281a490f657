# apps/equipe/urls.py

from django.urls import path
from . import views

app_name = 'equipe'

urlpatterns = [
    # === CADASTROS ===
    path('membros/', views.MembroEquipeView.as_view(), name='membros'),
    path('membros/<int:pk>/', views.MembroEquipeView.as_view(), name='membro'),
    path('processos/', views.ProcessoView.as_view(), name='processos'),
    path('processos/<int:pk>/', views.ProcessoView.as_view(), name='processo'),
    path('processos/<int:processo_id>/execucoes/', views.execucoes_view, name='execucoes'),
    path('execucoes/<int:execucao_id>/', views.execucao_atualizar_view, name='execucao'),
    path('modelos-atividades/', views.ModeloAtividadeView.as_view(), name='modelos'),
    path('modelos-atividades/<int:pk>/', views.ModeloAtividadeView.as_view(), name='modelo'),

    # === LISTAS DE ATIVIDADES ===
    path('listas/', views.listas_view, name='listas'),
    path('listas/<int:lista_id>/', views.lista_detalhe_view, name='lista'),
    path('listas/<int:lista_id>/itens/', views.lista_itens_view, name='lista_itens'),
    path('listas/<int:lista_id>/enviar-whatsapp/', views.enviar_whatsapp_view, name='enviar_whatsapp'),
    path('itens/<int:item_id>/concluir/', views.item_concluir_view, name='item_concluir'),

    path('estatisticas/', views.estatisticas_view, name='estatisticas'),
]
