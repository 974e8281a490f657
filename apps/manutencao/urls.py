# apps/manutencao/urls.py

from django.urls import path
from . import views

app_name = 'manutencao'

urlpatterns = [
    # === EQUIPAMENTOS ===
    path('equipamentos/', views.EquipamentoView.as_view(), name='equipamentos'),
    path('equipamentos/<int:pk>/', views.EquipamentoView.as_view(), name='equipamento'),

    # === CHAMADOS ===
    path('manutencoes/', views.ChamadoView.as_view(), name='chamados'),
    path('manutencoes/<int:pk>/', views.ChamadoView.as_view(), name='chamado'),
    path('manutencoes/<int:chamado_id>/concluir/', views.concluir_chamado_view, name='concluir'),
    path('manutencoes/<int:chamado_id>/conclusao/', views.conclusao_chamado_view, name='conclusao'),
]
