# apps/mercado/urls.py

from django.urls import path
from . import views

app_name = 'mercado'

urlpatterns = [
    path('categorias/', views.CategoriaView.as_view(), name='categorias'),
    path('categorias/<int:pk>/', views.CategoriaView.as_view(), name='categoria'),
    path('produtos/', views.ProdutoView.as_view(), name='produtos'),
    path('produtos/<int:pk>/', views.ProdutoView.as_view(), name='produto'),
    path('promocoes/', views.PromocaoView.as_view(), name='promocoes'),
    path('promocoes/<int:pk>/', views.PromocaoView.as_view(), name='promocao'),
    path('vendas/', views.vendas_view, name='vendas'),
    path('cashback/<str:unidade>/', views.cashback_view, name='cashback'),
    path('estatisticas/', views.estatisticas_view, name='estatisticas'),
]
