# apps/relatorios/urls.py

from django.urls import path
from . import views

app_name = 'relatorios'

urlpatterns = [
    # Manutenção
    path('manutencao.pdf', views.relatorio_manutencao_pdf, name='manutencao_pdf'),
    path('manutencao.csv', views.exportar_manutencao_csv, name='manutencao_csv'),
    path('manutencao.xlsx', views.exportar_manutencao_excel, name='manutencao_excel'),

    # Folha de pagamento
    path('folha.xlsx', views.exportar_folha_excel, name='folha_excel'),
    path('folha.pdf', views.relatorio_folha_pdf, name='folha_pdf'),

    # Mini mercado
    path('vendas.csv', views.exportar_vendas_csv, name='vendas_csv'),
]
