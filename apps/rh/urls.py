# apps/rh/urls.py

from django.urls import path
from . import views

app_name = 'rh'

urlpatterns = [
    path('funcionarios/', views.FuncionarioView.as_view(), name='funcionarios'),
    path('funcionarios/<int:pk>/', views.FuncionarioView.as_view(), name='funcionario'),
    path('funcionarios/<int:funcionario_id>/folha/', views.folha_funcionario_view, name='folha'),
    path('rh/estatisticas/', views.estatisticas_view, name='estatisticas'),
]
