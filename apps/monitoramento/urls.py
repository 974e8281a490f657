# apps/monitoramento/urls.py

from django.urls import path
from . import views

app_name = 'monitoramento'

urlpatterns = [
    # === PISCINA ===
    path('piscina/', views.LeituraPiscinaView.as_view(), name='piscina'),
    path('piscina/<int:pk>/', views.LeituraPiscinaView.as_view(), name='piscina_detalhe'),

    # === ÁGUA ===
    path('reservatorios/', views.ReservatorioView.as_view(), name='reservatorios'),
    path('reservatorios/<int:pk>/', views.ReservatorioView.as_view(), name='reservatorio'),
    path('agua/', views.LeituraAguaView.as_view(), name='agua'),
    path('agua/<int:pk>/', views.LeituraAguaView.as_view(), name='agua_detalhe'),
    path('hidrometros/', views.LeituraHidrometroView.as_view(), name='hidrometros'),
    path('hidrometros/<int:pk>/', views.LeituraHidrometroView.as_view(), name='hidrometro'),

    # === GÁS E ENERGIA ===
    path('gas/', views.LeituraGasView.as_view(), name='gas'),
    path('gas/<int:pk>/', views.LeituraGasView.as_view(), name='gas_detalhe'),
    path('energia/', views.EventoEnergiaView.as_view(), name='energia'),
    path('energia/<int:pk>/', views.EventoEnergiaView.as_view(), name='energia_detalhe'),
    path('energia/<int:evento_id>/resolver/', views.resolver_evento_energia_view, name='energia_resolver'),

    # === OCUPAÇÃO E RESÍDUOS ===
    path('ocupacao/', views.ocupacao_view, name='ocupacao'),
    path('residuos/', views.residuos_view, name='residuos'),
]
